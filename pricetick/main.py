# pricetick/main.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import logging

from pricetick.core.di import register_default_services, container
from pricetick.config.settings import SettingsManager
from pricetick.ui.window import TickerWindow


def main() -> None:
    # 1) Register default services (bus, settings, allocator, ticker, quotes)
    register_default_services()

    # 2) Logging level from settings
    settings: SettingsManager = container.resolve("settings")
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 3) Build UI around the shared services
    app = TickerWindow(
        bus=container.resolve("bus"),
        settings=settings,
        ticker=container.resolve("ticker"),
        quotes=container.resolve("quotes"),
    )

    # 4) Publish on the Tk thread
    container.resolve("quotes").set_dispatcher(app.after)

    # 5) Run
    app.run()


if __name__ == "__main__":
    main()
