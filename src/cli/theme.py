"""CLI theme configuration - all colors in one place.

Modify these values to customize the terminal color scheme.
Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for council-review CLI."""

    # -------------------------------------------------------------------------
    # Status colors (for success/error/warning indicators)
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    WARNING_BOLD = "bold yellow"
    INFO = "cyan"
    INFO_BOLD = "bold cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    HEADER = "bold"
    HEADER_SECTION = "bold magenta"
    DIM = "grey62"
    DIM_ITALIC = "grey62 italic"

    # -------------------------------------------------------------------------
    # Severity
    # -------------------------------------------------------------------------
    SEVERITY_CRITICAL = "bold red"
    SEVERITY_HIGH = "red"
    SEVERITY_MEDIUM = "yellow"
    SEVERITY_LOW = "green"
    SEVERITY_INFO = "grey62"

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------
    ACTION_FIX_NOW = "bold red"
    ACTION_INVESTIGATE = "yellow"
    ACTION_DEFER = "grey62"
    ACTION_REJECT = "grey62 strike"

    # -------------------------------------------------------------------------
    # Table columns
    # -------------------------------------------------------------------------
    TABLE_ID = "cyan"
    TABLE_VALUE = "bold"

    # -------------------------------------------------------------------------
    # Panel borders
    # -------------------------------------------------------------------------
    BORDER_WARNING = "yellow"


# Default theme instance - import this in other modules
theme = Theme()
