"""
Main entry point for the Scale Compare application.

This module loads the unit, label and object resources and launches the
comparison window.
"""

import logging
import sys
import traceback

from src.services.exceptions import ResourceLoadError
from src.services.resource_loader import CatalogBundle, load_catalogs_from_directory
from src.utils.config import get_config


def initialize_application() -> CatalogBundle:
    """
    Initialize the application.

    Loads every resource in order (units, labels, objects).

    Returns:
        The loaded catalogs

    Raises:
        ResourceLoadError: If any resource fails to load
    """
    config = get_config()
    print(f"Loading resources from {config.data_dir}...")
    bundle = load_catalogs_from_directory(
        config.data_dir,
        languages=config.languages,
        user_locale=config.user_locale,
    )
    print(f"Loaded {len(bundle.units)} units, {len(bundle.labels)} labels, {len(bundle.objects)} objects")
    return bundle


def main():
    """
    Main application entry point.

    Initializes the application and launches the main window.
    """
    import customtkinter as ctk

    from src.ui.main_window import ScaleWindow

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Set CustomTkinter appearance
    ctk.set_appearance_mode("system")  # Modes: system, light, dark
    ctk.set_default_color_theme("blue")  # Themes: blue, dark-blue, green

    config = get_config()
    print(f"Starting {config.app_name} v{config.app_version}")

    try:
        bundle = initialize_application()
    except ResourceLoadError as e:
        print(f"ERROR: Failed to initialize application: {e}")
        sys.exit(1)

    try:
        app = ScaleWindow(bundle, significant_digits=config.significant_digits)
        app.mainloop()

    except Exception as e:
        print(f"ERROR: Application crashed: {e}")
        traceback.print_exc()
        sys.exit(1)

    print("Application closed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
