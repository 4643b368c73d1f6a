"""Provider, continent and region code constants for the bundled catalog."""

CONTINENT_ASIA = "Asia"
CONTINENT_EUROPE = "Europe"
CONTINENT_NORTH_AMERICA = "North America"
CONTINENT_SOUTH_AMERICA = "South America"
CONTINENT_OCEANIA = "Oceania"
CONTINENT_AFRICA = "Africa"

PROVIDER_AWS = "aws"
PROVIDER_AZURE = "azure"
PROVIDER_GCP = "gcp"
PROVIDER_YANDEX = "yandex"
PROVIDER_VK = "vk"
PROVIDER_ALIBABA = "alibaba"


class AWS:
    """Amazon Web Services region codes."""

    # North America
    US_EAST_1 = "us-east-1"  # N. Virginia
    US_EAST_2 = "us-east-2"  # Ohio
    US_WEST_1 = "us-west-1"  # N. California
    US_WEST_2 = "us-west-2"  # Oregon
    CA_CENTRAL_1 = "ca-central-1"
    CA_WEST_1 = "ca-west-1"  # Calgary

    # South America
    SA_EAST_1 = "sa-east-1"  # Sao Paulo

    # Europe
    EU_WEST_1 = "eu-west-1"  # Ireland
    EU_WEST_2 = "eu-west-2"  # London
    EU_WEST_3 = "eu-west-3"  # Paris
    EU_CENTRAL_1 = "eu-central-1"  # Frankfurt
    EU_CENTRAL_2 = "eu-central-2"  # Zurich
    EU_NORTH_1 = "eu-north-1"  # Stockholm
    EU_SOUTH_1 = "eu-south-1"  # Milan
    EU_SOUTH_2 = "eu-south-2"  # Spain

    # Asia Pacific
    AP_SOUTH_1 = "ap-south-1"  # Mumbai
    AP_SOUTH_2 = "ap-south-2"  # Hyderabad
    AP_SOUTHEAST_1 = "ap-southeast-1"  # Singapore
    AP_SOUTHEAST_2 = "ap-southeast-2"  # Sydney
    AP_SOUTHEAST_3 = "ap-southeast-3"  # Jakarta
    AP_SOUTHEAST_4 = "ap-southeast-4"  # Melbourne
    AP_SOUTHEAST_5 = "ap-southeast-5"  # Malaysia
    AP_EAST_1 = "ap-east-1"  # Hong Kong
    AP_NORTHEAST_1 = "ap-northeast-1"  # Tokyo
    AP_NORTHEAST_2 = "ap-northeast-2"  # Seoul
    AP_NORTHEAST_3 = "ap-northeast-3"  # Osaka

    # Middle East
    ME_SOUTH_1 = "me-south-1"  # Bahrain
    ME_CENTRAL_1 = "me-central-1"  # UAE
    IL_CENTRAL_1 = "il-central-1"  # Tel Aviv

    # Africa
    AF_SOUTH_1 = "af-south-1"  # Cape Town

    # Government (US)
    US_GOV_EAST_1 = "us-gov-east-1"
    US_GOV_WEST_1 = "us-gov-west-1"


class Azure:
    """Microsoft Azure region codes."""

    EAST_US = "eastus"
    EAST_US_2 = "eastus2"
    WEST_US = "westus"
    WEST_US_2 = "westus2"
    WEST_US_3 = "westus3"
    CENTRAL_US = "centralus"
    CANADA_CENTRAL = "canadacentral"

    NORTH_EUROPE = "northeurope"
    WEST_EUROPE = "westeurope"
    UK_SOUTH = "uksouth"
    FRANCE_CENTRAL = "francecentral"
    GERMANY_WEST_CENTRAL = "germanywestcentral"
    GERMANY_CENTRAL = "germanycentral"  # sovereign cloud, deprecated
    SWEDEN_CENTRAL = "swedencentral"
    ITALY_NORTH = "italynorth"

    JAPAN_EAST = "japaneast"
    JAPAN_WEST = "japanwest"
    SOUTHEAST_ASIA = "southeastasia"
    CENTRAL_INDIA = "centralindia"
    UAE_NORTH = "uaenorth"

    AUSTRALIA_EAST = "australiaeast"
    NEW_ZEALAND_NORTH = "newzealandnorth"

    SOUTH_AFRICA_NORTH = "southafricanorth"
    BRAZIL_SOUTH = "brazilsouth"


class GCP:
    """Google Cloud Platform region codes."""

    US_CENTRAL1 = "us-central1"  # Iowa
    US_EAST1 = "us-east1"  # South Carolina
    US_EAST4 = "us-east4"  # Northern Virginia
    US_WEST1 = "us-west1"  # Oregon
    NORTHAMERICA_NORTHEAST1 = "northamerica-northeast1"  # Montreal
    SOUTHAMERICA_EAST1 = "southamerica-east1"  # Sao Paulo

    EUROPE_WEST1 = "europe-west1"  # Belgium
    EUROPE_WEST2 = "europe-west2"  # London
    EUROPE_WEST3 = "europe-west3"  # Frankfurt
    EUROPE_NORTH1 = "europe-north1"  # Finland

    ASIA_NORTHEAST1 = "asia-northeast1"  # Tokyo
    ASIA_NORTHEAST2 = "asia-northeast2"  # Osaka
    ASIA_SOUTHEAST1 = "asia-southeast1"  # Singapore
    ASIA_SOUTH1 = "asia-south1"  # Mumbai
    ME_CENTRAL2 = "me-central2"  # Dammam

    AUSTRALIA_SOUTHEAST1 = "australia-southeast1"  # Sydney
    AFRICA_SOUTH1 = "africa-south1"  # Johannesburg


class Yandex:
    """Yandex Cloud region codes."""

    RU_CENTRAL1 = "ru-central1"
    KZ1 = "kz1"


class VK:
    """VK Cloud region codes."""

    RU_MSK = "ru-msk"
    RU_KZN = "ru-kzn"


class Alibaba:
    """Alibaba Cloud region codes. Several reuse AWS-style codes."""

    CN_HANGZHOU = "cn-hangzhou"
    CN_SHANGHAI = "cn-shanghai"
    CN_BEIJING = "cn-beijing"
    CN_QINGDAO = "cn-qingdao"
    AP_SOUTHEAST_1 = "ap-southeast-1"  # Singapore
    AP_NORTHEAST_1 = "ap-northeast-1"  # Tokyo
    EU_CENTRAL_1 = "eu-central-1"  # Frankfurt
    US_EAST_1 = "us-east-1"  # Virginia
    US_WEST_1 = "us-west-1"  # Silicon Valley


def provider_codes(table: type) -> list[str]:
    """Every region code declared on one of the provider tables above."""
    return [value for key, value in vars(table).items() if key.isupper() and isinstance(value, str)]
