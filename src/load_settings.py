import os
from dotenv import load_dotenv

from src.models.dc_models import RunnerSettingsModel

load_dotenv()


def load_settings() -> RunnerSettingsModel:
    """Read the runner settings from the environment (and .env if present).

    Returns:
        RunnerSettingsModel: validated settings, defaults for unset variables
    """
    values = {}
    interval_ms = os.getenv("RUNNER_INTERVAL_MS")
    log_level = os.getenv("RUNNER_LOG_LEVEL")
    if interval_ms is not None:
        values["interval_ms"] = interval_ms
    if log_level is not None:
        values["log_level"] = log_level
    return RunnerSettingsModel(**values)


if __name__ == "__main__":
    print(load_settings())
