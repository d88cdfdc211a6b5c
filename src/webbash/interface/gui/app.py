from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes the CustomTkinter environment, loads the persisted host
preferences, seeds one shell session and binds it to the terminal view.
"""

import logging

from webbash.core.shell.session import ShellSession
from webbash.core.validator import validate_config
from webbash.domain import config as cfg
from webbash.domain import constants as const
from webbash.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
)
from webbash.interface.gui.components.main_window import create_main_window
from webbash.interface.gui.components.terminal import TerminalFrame
from webbash.interface.gui.controllers.shell_controller import ShellController
from webbash.utils.i18n import i18n

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """
    Initialize and launch the Graphical User Interface.

    Startup runs in four phases: configuration, diagnostics, view and
    session construction, and loop entry.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: PERSISTENT PREFERENCES
    # -----------------------------------------------------------------------------
    config, warnings = validate_config(cfg.load_config())

    # -----------------------------------------------------------------------------
    # PHASE 2: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    log_path = get_default_log_path() if config["save_log"] else None
    configure_logging(LoggingConfig(level=config["log_level"], console=True, log_file=log_path))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if config["locale"] != i18n.locale:
        i18n.load_locale(config["locale"])

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW AND SESSION CONSTRUCTION
    # -----------------------------------------------------------------------------
    app = create_main_window(config["appearance_mode"])

    terminal = TerminalFrame(app, font_size=config["font_size"])
    terminal.grid(row=0, column=0, sticky="nsew", padx=16, pady=16)

    session = ShellSession.create(user=config["user"], host=config["host"])
    controller = ShellController(app, terminal, session)
    controller.show_banner(i18n.t("app.banner"))
    controller.bind_events()

    # -----------------------------------------------------------------------------
    # PHASE 4: LIFECYCLE FINALIZATION
    # -----------------------------------------------------------------------------
    def on_closing() -> None:
        """Persist the preferences and close the window."""
        cfg.save_config(config)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.mainloop()


if __name__ == "__main__":
    main()
