"""
Location data for the Netherlands: the country row, its twelve provinces
and the cities seeded per province.
"""
from petdirectory.services.province_seeder import CountrySpec, ProvinceSpec

NETHERLANDS = CountrySpec(slug="netherlands", code="NL", name="Nederland")

DUTCH_PROVINCES = [
    ProvinceSpec(slug="noord-holland", name="Noord-Holland", code="NH"),
    ProvinceSpec(slug="zuid-holland", name="Zuid-Holland", code="ZH"),
    ProvinceSpec(slug="utrecht", name="Utrecht", code="UT"),
    ProvinceSpec(slug="noord-brabant", name="Noord-Brabant", code="NB"),
    ProvinceSpec(slug="gelderland", name="Gelderland", code="GE"),
    ProvinceSpec(slug="overijssel", name="Overijssel", code="OV"),
    ProvinceSpec(slug="limburg", name="Limburg", code="LI"),
    ProvinceSpec(slug="friesland", name="Friesland", code="FR"),
    ProvinceSpec(slug="groningen", name="Groningen", code="GR"),
    ProvinceSpec(slug="drenthe", name="Drenthe", code="DR"),
    ProvinceSpec(slug="flevoland", name="Flevoland", code="FL"),
    ProvinceSpec(slug="zeeland", name="Zeeland", code="ZE"),
]

# Province slug -> city display names, processed in this order
DUTCH_CITIES = {
    "noord-holland": [
        "Amsterdam", "Haarlem", "Zaandam", "Hilversum", "Alkmaar",
        "Hoorn", "Purmerend", "Amstelveen", "Hoofddorp", "Den Helder",
        "Heerhugowaard", "Velsen", "Bussum", "Enkhuizen", "Beverwijk",
    ],
    "zuid-holland": [
        "Rotterdam", "Den Haag", "Leiden", "Delft", "Dordrecht",
        "Gouda", "Zoetermeer", "Schiedam", "Vlaardingen", "Alphen aan den Rijn",
        "Capelle aan den IJssel", "Spijkenisse", "Rijswijk", "Katwijk", "Gorinchem",
    ],
    "utrecht": [
        "Utrecht", "Amersfoort", "Zeist", "Nieuwegein", "Veenendaal",
        "Houten", "IJsselstein", "Woerden", "Soest", "Baarn",
    ],
    "noord-brabant": [
        "Eindhoven", "Tilburg", "Breda", "'s-Hertogenbosch", "Helmond",
        "Oss", "Roosendaal", "Bergen op Zoom", "Waalwijk", "Veldhoven",
        "Uden", "Oosterhout", "Veghel", "Boxtel",
    ],
    "gelderland": [
        "Arnhem", "Nijmegen", "Apeldoorn", "Ede", "Doetinchem",
        "Harderwijk", "Zutphen", "Tiel", "Wageningen", "Barneveld",
        "Winterswijk", "Culemborg",
    ],
    "overijssel": [
        "Zwolle", "Enschede", "Almelo", "Deventer", "Hengelo",
        "Kampen", "Oldenzaal", "Rijssen", "Hardenberg",
    ],
    "limburg": [
        "Maastricht", "Venlo", "Heerlen", "Roermond", "Sittard",
        "Geleen", "Weert", "Kerkrade", "Venray",
    ],
    "friesland": [
        "Leeuwarden", "Sneek", "Drachten", "Heerenveen", "Harlingen",
        "Franeker",
    ],
    "groningen": [
        "Groningen", "Hoogezand", "Veendam", "Stadskanaal", "Delfzijl",
    ],
    "drenthe": [
        "Assen", "Emmen", "Hoogeveen", "Meppel", "Coevorden",
    ],
    "flevoland": [
        "Almere", "Lelystad", "Dronten", "Emmeloord", "Zeewolde",
    ],
    "zeeland": [
        "Middelburg", "Vlissingen", "Goes", "Terneuzen", "Zierikzee",
    ],
}
