"""Controllers module - Application-level controllers for coordinating business logic."""

from controllers.app_controller import (
    AppController,
    CatalogEntry,
    get_app_controller,
    reset_app_controller,
)

__all__ = ["AppController", "CatalogEntry", "get_app_controller", "reset_app_controller"]
