from .util import getLogger
from .data import (AlarmStatus, ArmingStatus, SensorType, Sensor, SecurityError,
                   NotFoundError, ReentrantCallError)
from .event import SecurityEvents
from .repository import SecurityRepository, InMemorySecurityRepository
from .security import SecurityService, StatusListener, DEFAULT_CONFIDENCE_THRESHOLD
from .config import load_config, ConfigError
