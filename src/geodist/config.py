from dataclasses import dataclass
from typing import Optional


@dataclass
class GeodistConfig:
    """Configuration for the geodist CLI."""

    result_file: str = "result.txt"
    error_log: str = "error.log"
    distance_plot: str = "distance.png"
    azimuth_plot: str = "azimuth.png"
    no_plot: bool = False
    map: bool = False
    map_output: Optional[str] = None
    open_map: bool = False
    quiet: bool = False
    log_level: str = "WARNING"
    metrics: bool = False
