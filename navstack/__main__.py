"""Main entry point for running navstack as a module.

This allows running with: python -m navstack
"""

from .app import NavStackApp
from .config import get_setting, load_config
from .logging_config import configure_logging


def main():
    """Load configuration, set up logging and run the application."""
    load_config()
    configure_logging(
        level=get_setting("logging", "log_level", "INFO"),
        log_file=get_setting("logging", "log_filename", ""),
        console=get_setting("logging", "console", False),
    )
    app = NavStackApp(
        title=get_setting("general", "title"),
        show_breadcrumbs=get_setting("general", "show_breadcrumbs", True),
    )
    app.run()


if __name__ == "__main__":
    main()
