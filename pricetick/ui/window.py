# pricetick/ui/window.py
# -*- coding: utf-8 -*-
"""
PriceTick - Main Window

- PriceView bound to the ticker through the EventBus.
- "Update price" nudges the price by a random step (demo source).
- "Live" toggles polling of the HTTP quote feed every `feed_interval_ms`.
- "Theme" cycles the theme tokens and persists the choice.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont
from typing import Any, Dict, Optional

from pricetick.config import constants as C
from pricetick.config.settings import SettingsManager
from pricetick.config.themes import get_theme, next_theme_name
from pricetick.core.events import EventBus, PriceUpdateFailed, ThemeToggled
from pricetick.services.quote_service import QuoteService
from pricetick.services.ticker_service import PriceTicker
from pricetick.ui.price_view import PriceView


class TickerWindow(tk.Tk):
    """Main application window."""

    def __init__(self, *, bus: EventBus, settings: SettingsManager, ticker: PriceTicker, quotes: QuoteService) -> None:
        super().__init__()

        self.bus = bus
        self.settings = settings
        self.ticker = ticker
        self.quotes = quotes

        self.theme_name: str = self.settings.theme_name()
        self.t: Dict[str, Any] = self._get_theme(self.theme_name)

        self._live = tk.BooleanVar(value=False)
        self._poll_after: Optional[str] = None
        self._status = tk.StringVar(value="")

        self.title(C.APP_TITLE)
        self.configure(bg=self.t["SURFACE"])
        x, y = self.settings.window_position()
        self.geometry(f"{C.WIN_W}x{C.WIN_H}+{x}+{y}")

        self._build_ui()

        self.bus.subscribe(ThemeToggled, self._on_theme_toggled_evt)
        self.bus.subscribe(PriceUpdateFailed, self._on_update_failed)
        self.protocol("WM_DELETE_WINDOW", self._quit_app)

    # ================= Build =================
    def _build_ui(self) -> None:
        self.root_frame = tk.Frame(self, bg=self.t["SURFACE"])
        self.root_frame.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        self.price_view = PriceView(
            self.root_frame,
            bus=self.bus,
            theme=self.t,
            tokens=self.ticker.tokens,
            highlight_ms=self.settings.highlight_ms(),
        )
        self.price_view.pack(expand=True)

        bar = tk.Frame(self.root_frame, bg=self.t["SURFACE"])
        bar.pack(fill=tk.X, side=tk.BOTTOM)

        self.update_btn = tk.Button(bar, text="Update price", command=self._on_update_click)
        self.update_btn.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.live_chk = tk.Checkbutton(bar, text="Live", variable=self._live, command=self._on_toggle_live)
        self.live_chk.pack(side=tk.LEFT, padx=(8, 0))
        self.theme_btn = tk.Button(bar, text="Theme", command=self._on_toggle_theme)
        self.theme_btn.pack(side=tk.LEFT, padx=(8, 0))

        self.status_lbl = tk.Label(self.root_frame, textvariable=self._status, bd=0)
        self.status_lbl.pack(fill=tk.X, side=tk.BOTTOM)

        self._apply_font_family(self._pick_font_family())

    # ================= Theming / Fonts =================
    def _get_theme(self, name: str) -> Dict[str, Any]:
        return dict(get_theme(name))

    def _pick_font_family(self) -> str:
        installed = set(tkfont.families(self))
        for name in C.PREFERRED_FONTS:
            if name in installed:
                return name
        return "TkDefaultFont"

    def _apply_font_family(self, family: str) -> None:
        t = dict(self.t)
        t["FONT_FAMILY"] = family
        self.t = t
        self.configure(bg=self.t["SURFACE"])
        self.root_frame.configure(bg=self.t["SURFACE"])
        self.status_lbl.configure(bg=self.t["SURFACE"], fg=self.t["ON_SURFACE_VARIANT"])
        self.price_view.set_theme(self.t)

    def _on_toggle_theme(self) -> None:
        name = next_theme_name(self.theme_name)
        self.settings.set_theme_name(name)
        self.bus.publish(ThemeToggled(theme_name=name))

    def _on_theme_toggled_evt(self, evt: ThemeToggled) -> None:
        self.theme_name = evt.theme_name
        self.t = self._get_theme(self.theme_name)
        self._apply_font_family(self._pick_font_family())

    # ================= Price sources =================
    def _on_update_click(self) -> None:
        self._status.set("")
        self.quotes.nudge()

    def _on_toggle_live(self) -> None:
        if self._live.get():
            self.quotes.set_dispatcher(self.after)
            self._poll()
        else:
            self._cancel_poll()

    def _poll(self) -> None:
        self.quotes.refresh()
        self._poll_after = self.after(self.settings.feed_interval_ms(), self._poll)

    def _cancel_poll(self) -> None:
        if self._poll_after is not None:
            self.after_cancel(self._poll_after)
            self._poll_after = None

    def _on_update_failed(self, evt: PriceUpdateFailed) -> None:
        self._status.set(f"Update rejected: {evt.error}")

    # ================= Lifecycle =================
    def _quit_app(self) -> None:
        """Stop timers, persist position, drop subscribers and destroy the window."""
        self._cancel_poll()
        self.settings.set_window_position(self.winfo_x(), self.winfo_y())
        self.ticker.close()
        self.bus.clear()  # a feed reply still in flight finds no handlers
        self.destroy()

    def run(self) -> None:
        self.mainloop()
