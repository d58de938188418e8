"""
Centralized Help Text Constants

CLI help texts and exit codes shared by content-preflight subcommands.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    VALIDATION_FAILED = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_CONFIGURATION = 3


MAIN_HELP = """Content Preflight CLI - Check articles and books before publishing.

Validates front matter and book settings against the publishing rules and
reports each problem as an error (blocks publishing) or a warning.
"""

CHECK_HELP = "Check content items against the publishing rules"

CHECK_CONTENT_DIR_HELP = (
    "Directory containing articles/ and books/ (default: from configuration, "
    "otherwise the current directory)"
)

CHECK_FILE_HELP = (
    "Check a single article or chapter file, or a single book directory, "
    "instead of a whole content directory"
)

CHECK_KIND_HELP = (
    "Item kind of --file. Inferred from its location when omitted: "
    "articles/*.md is an article, books/<slug>/ a book, books/<slug>/*.md a chapter"
)

CHECK_STRICT_HELP = "Fail on warnings in addition to errors"

CHECK_REPORT_HELP = "Write a consolidated JSON report to this path"

CHECK_FORMAT_HELP = "Console output format (default: human)"

CONFIG_HELP = "Path to a YAML configuration file"

LOG_LEVEL_HELP = "Logging level (default: WARNING)"

LOG_FILE_HELP = "Also write logs to this file"
