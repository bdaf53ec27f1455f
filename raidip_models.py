from dataclasses import dataclass


@dataclass(frozen=True)
class LatestObservation:
    """
    Last successful poll result.
    - ip: dotted-quad string, "" while unknown.
    - observed_at: local wall-clock time as HH:MM.
    - country_name: country the geolocation service reported for ip.
    """
    ip: str = ""
    observed_at: str = ""
    country_name: str = ""

    @property
    def known(self) -> bool:
        return self.ip != ""
