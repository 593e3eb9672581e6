from enum import Enum


class OutputFormat(str, Enum):
    RICH = "rich"
    MARKDOWN = "markdown"
    JSON = "json"
