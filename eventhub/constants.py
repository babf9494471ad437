import os
import sys

CONFIG_SECTION = "EVENTHUB"


def get_data_directory():
    """
    Returns the writable data directory for the application.
    Windows: %APPDATA%/eventhub
    Linux/Mac: ~/.eventhub
    """
    if sys.platform == "win32":
        base_path = os.environ.get("APPDATA", os.path.expanduser("~"))
        path = os.path.join(base_path, "eventhub")
    else:
        path = os.path.expanduser("~/.eventhub")

    if not os.path.exists(path):
        os.makedirs(path)

    return path
