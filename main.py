#!/usr/bin/env python3
"""wxPython entry point that launches the companion window."""

from __future__ import annotations

import sys
import traceback

import wx
from loguru import logger

from controllers.app_controller import get_app_controller
from utils.constants import LOGS_DIR, ensure_base_dirs
from utils.logging_config import configure_logging


class CompanionWxApp(wx.App):
    """Bootstrap the deck builder, library and tracker window."""

    def OnInit(self) -> bool:  # noqa: N802 - wx override
        logger.info("Starting Gwent Companion (wx)")
        controller = get_app_controller()
        self.controller = controller
        frame = controller.create_frame()
        self.SetTopWindow(frame)
        frame.Show()
        return True

    def OnExceptionInMainLoop(self) -> bool:  # noqa: N802 - wx override
        """Handle exceptions in the main event loop."""
        exc_type, exc_value, exc_traceback = sys.exc_info()
        logger.error("=== UNHANDLED EXCEPTION IN MAIN LOOP ===")
        logger.error(f"Exception type: {exc_type.__name__}")
        logger.error(f"Exception value: {exc_value}")
        logger.error("Traceback:")
        for line in traceback.format_tb(exc_traceback):
            logger.error(line.rstrip())
        logger.error("=== END UNHANDLED EXCEPTION ===")

        error_msg = f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}\n\nCheck the log file for details."
        wx.MessageBox(error_msg, "Application Error", wx.OK | wx.ICON_ERROR)

        # Return True to continue running, False to exit
        return True


def main() -> None:
    ensure_base_dirs()
    configure_logging(LOGS_DIR)

    def global_exception_handler(exc_type, exc_value, exc_traceback):
        logger.error("=== UNCAUGHT EXCEPTION (GLOBAL) ===")
        logger.error(f"Exception type: {exc_type.__name__}")
        logger.error(f"Exception value: {exc_value}")
        logger.error("Traceback:")
        for line in traceback.format_tb(exc_traceback):
            logger.error(line.rstrip())
        logger.error("=== END UNCAUGHT EXCEPTION ===")

        # Call default handler
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = global_exception_handler

    app = CompanionWxApp(False)
    app.MainLoop()


if __name__ == "__main__":
    main()
