# Models package
from petdirectory.models.models import (
    Country,
    Province,
    City,
)
