# Schemas package
from petdirectory.schemas.locations import CountryResponse, ProvinceResponse, CityResponse
