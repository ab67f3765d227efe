# properdata package
from .errors import (
    InvalidKey,
    IOFailure,
    KeyNotFound,
    MalformedQuotedValue,
    NoListenersRegistered,
    ParseError,
    PropertiesError,
)
from .listeners import (
    Listener,
    ListenerKind,
    ListenerRegistry,
    boolean_listener,
    double_listener,
    float_listener,
    integer_listener,
    string_listener,
)
from .properties_file import KeyMatch, PropertiesFile
from .repositories import DirectoryCreation, FileCreation, FileLifecycle
from .separators import KeyValueSeparator
