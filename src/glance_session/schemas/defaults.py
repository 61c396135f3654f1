"""Default values for the viewer session.

These constants are used as `Field(default=...)` values in the Pydantic
schemas and as the implicit defaults of the Settings Store. They live here
(in the schemas layer) so that `schemas` does not depend on `services`.
"""

# =============================================================================
# SETTINGS
# =============================================================================
# Reserved setting keys. Any other key is allowed and settable through the
# API or the `setting.<name>` URL parameter.
SETTING_NO_HISTORY = "noHistory"
SETTING_COLLAPSE_DATASET_PANELS = "collapseDatasetPanels"
SETTING_SUPPRESS_BROWSER_WARNING = "suppressBrowserWarning"

DEFAULT_SETTINGS: dict = {
    SETTING_NO_HISTORY: False,
    SETTING_COLLAPSE_DATASET_PANELS: False,
    SETTING_SUPPRESS_BROWSER_WARNING: False,
}

# =============================================================================
# URL PARAMETERS
# =============================================================================
URL_SETTING_PREFIX = "setting."
URL_NAME_PARAM = "name"
URL_URL_PARAM = "url"

# Query key carrying the app flag of the current history entry
URL_VIEW_PARAM = "view"
URL_VIEW_APP = "app"

# Group label attached to every batch dispatched from page-load parameters
URL_LOAD_GROUP = "resources from url"

# =============================================================================
# DATASET LOADING
# =============================================================================
DEFAULT_FETCH_TIMEOUT = 30.0  # seconds
DEFAULT_LOADER_WORKERS = 4

# =============================================================================
# BUILT-IN PROXY CONFIGURATION
# =============================================================================
# Generic configuration used when neither an explicit nor a registered
# configuration is available.
BUILTIN_PROXY_DEFINITIONS: dict = {
    "Sources": {
        "TrivialProducer": {"class": "TrivialProducer"},
    },
    "Representations": {
        "Geometry": {"class": "GeometryRepresentation"},
        "Slice": {"class": "SliceRepresentation"},
        "Volume": {"class": "VolumeRepresentation"},
    },
    "Views": {
        "View3D": {"class": "View"},
        "View2D_X": {"class": "View2D", "axis": 0},
        "View2D_Y": {"class": "View2D", "axis": 1},
        "View2D_Z": {"class": "View2D", "axis": 2},
    },
}

BUILTIN_PROXY_REPRESENTATIONS: dict = {
    "View3D": {"vtkPolyData": "Geometry", "vtkImageData": "Volume"},
    "View2D": {"vtkPolyData": "Geometry", "vtkImageData": "Slice"},
}
