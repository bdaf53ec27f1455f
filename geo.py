import requests

from raidip_config import GEO_API_URL
from raidip_errors import DecodeError, NetworkError


def resolve_country(ip):
    try:
        response = requests.get(GEO_API_URL, params={"ip": ip})
    except requests.RequestException as e:
        raise NetworkError(f"geolocation request failed: {e}") from e

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"geolocation response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("geolocation response is not a JSON object")
    country_name = data.get("country_name")
    if not isinstance(country_name, str):
        raise DecodeError("geolocation response has no country_name")
    return country_name
