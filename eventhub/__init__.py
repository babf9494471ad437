from eventhub.config import RegistryConfig
from eventhub.lib.events import EventRegistry, SubscriptionHandle, detach_events
from eventhub.lib.exceptions import ConfigurationError, EventHubError, InvalidArgument
from eventhub.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    EventRegistry.__name__,
    SubscriptionHandle.__name__,
    RegistryConfig.__name__,
    EventHubError.__name__,
    InvalidArgument.__name__,
    ConfigurationError.__name__,
    detach_events.__name__,
]
