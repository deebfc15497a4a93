# pricetick/ui/price_view.py
# -*- coding: utf-8 -*-
"""
PriceView: renders a price token list as one label per glyph.

- Labels are keyed by token identity: a carried-over identity keeps its label
  (no animation), a fresh identity gets a new label that slides in from the top.
- Integer digits and grouping separators use the large glyph size; the currency
  symbol, decimal separator and cents use the small size, raised to the top.
- Highlighted glyphs take the direction color (SUCCESS up / ERROR down) and fade
  back to ON_SURFACE after `highlight_ms`.

Public API:
    PriceView(parent, *, bus, theme, tokens, highlight_ms)
    render(tokens, direction)
    set_theme(theme)
"""

from __future__ import annotations
import tkinter as tk
from typing import Any, Callable, Dict, List, Optional, Sequence

from pricetick.core.events import EventBus, PriceTokensChanged
from pricetick.core.tokens import Direction, Token, TokenKind

__all__ = ["PriceView", "glyph_style", "highlight_color_for"]

_LARGE_KINDS = (TokenKind.DIGIT, TokenKind.GROUP_SEPARATOR)

SLIDE_MS = 250
SLIDE_STEP_MS = 16


def highlight_color_for(direction: Direction, theme: Dict[str, Any]) -> str:
    """Color used for highlighted glyphs after a move in `direction`."""
    neutral = str(theme.get("ON_SURFACE", "#f0f2f5"))
    if direction is Direction.INCREASED:
        return str(theme.get("SUCCESS", neutral))
    if direction is Direction.DECREASED:
        return str(theme.get("ERROR", neutral))
    return neutral


def glyph_style(token: Token, theme: Dict[str, Any], highlight_color: Optional[str] = None) -> Dict[str, Any]:
    """Return label options for one token: font, fg, anchor and top padding."""
    family = str(theme.get("FONT_FAMILY", "") or "")
    large = int(theme.get("GLYPH_LARGE", 64))
    small = int(theme.get("GLYPH_SMALL", 32))
    raise_px = int(theme.get("SMALL_RAISE", 14))

    is_large = token.kind in _LARGE_KINDS and not token.is_fractional
    fg = str(theme.get("ON_SURFACE", "#f0f2f5"))
    if token.is_highlighted and highlight_color:
        fg = highlight_color

    return {
        "font": (family, large if is_large else small, "bold"),
        "fg": fg,
        "anchor": "s" if is_large else "n",
        "pady": 0 if is_large else raise_px,
    }


class PriceView(tk.Frame):
    """Row of glyph labels bound to the ticker through PriceTokensChanged."""

    def __init__(
        self,
        parent,
        *,
        bus: Optional[EventBus] = None,
        theme: Dict[str, Any],
        tokens: Sequence[Token] = (),
        highlight_ms: int = 350,
        **kwargs
    ) -> None:
        self.t = dict(theme or {})
        super().__init__(parent, bg=self.t.get("SURFACE", "#1a1a22"), highlightthickness=0, bd=0, **kwargs)

        self._highlight_ms = int(highlight_ms)
        self._labels: Dict[str, tk.Label] = {}
        self._tokens: List[Token] = []
        self._highlight_color: str = highlight_color_for(Direction.UNCHANGED, self.t)
        self._fade_after: Optional[str] = None

        self._unsub: Optional[Callable[[], None]] = None
        if bus is not None:
            self._unsub = bus.subscribe(PriceTokensChanged, self._on_tokens_changed)

        self.render(tokens, Direction.UNCHANGED, animate=False)

    # ---------- public ----------
    def render(self, tokens: Sequence[Token], direction: Direction, *, animate: bool = True) -> None:
        """Install a new token list; only glyphs with fresh identities animate."""
        self._tokens = list(tokens)
        self._highlight_color = highlight_color_for(direction, self.t)

        keep = {tok.identity for tok in self._tokens}
        for identity in [i for i in self._labels if i not in keep]:
            self._labels.pop(identity).destroy()

        for lbl in self._labels.values():
            lbl.pack_forget()

        for tok in self._tokens:
            style = glyph_style(tok, self.t, self._highlight_color)
            lbl = self._labels.get(tok.identity)
            fresh = lbl is None
            if fresh:
                lbl = tk.Label(self, text=tok.text, bg=self.t.get("SURFACE", "#1a1a22"), bd=0, padx=0)
                self._labels[tok.identity] = lbl
            lbl.configure(text=tok.text, font=style["font"], fg=style["fg"])
            lbl.pack(side=tk.LEFT, anchor=style["anchor"], pady=(style["pady"], 0))
            if fresh and animate:
                self._slide_in(lbl, style["pady"])

        self._schedule_fade()

    def set_theme(self, theme: Dict[str, Any]) -> None:
        self.t = dict(theme or {})
        self.configure(bg=self.t.get("SURFACE", "#1a1a22"))
        for lbl in self._labels.values():
            lbl.configure(bg=self.t.get("SURFACE", "#1a1a22"))
        self.render(self._tokens, Direction.UNCHANGED, animate=False)

    def destroy(self) -> None:
        if self._unsub is not None:
            self._unsub()
            self._unsub = None
        self._cancel_fade()
        super().destroy()

    # ---------- internals ----------
    def _on_tokens_changed(self, evt: PriceTokensChanged) -> None:
        self.render(evt.tokens, evt.direction)

    def _slide_in(self, lbl: tk.Label, target_pady: int) -> None:
        """Drop a fresh glyph from above into its resting position."""
        steps = max(1, SLIDE_MS // SLIDE_STEP_MS)
        start = target_pady + int(self.t.get("GLYPH_SMALL", 32))

        def _tick(i: int = 0) -> None:
            if not lbl.winfo_exists():
                return
            frac = (i + 1) / steps
            eased = 1.0 - (1.0 - frac) ** 2  # ease-out
            pady = int(round(start + (target_pady - start) * eased))
            lbl.pack_configure(pady=(max(0, pady), 0))
            if i + 1 < steps:
                self.after(SLIDE_STEP_MS, _tick, i + 1)

        lbl.pack_configure(pady=(start, 0))
        self.after(SLIDE_STEP_MS, _tick)

    def _schedule_fade(self) -> None:
        self._cancel_fade()
        if any(tok.is_highlighted for tok in self._tokens):
            self._fade_after = self.after(self._highlight_ms, self._fade_highlight)

    def _cancel_fade(self) -> None:
        if self._fade_after is not None:
            self.after_cancel(self._fade_after)
            self._fade_after = None

    def _fade_highlight(self) -> None:
        """Return highlighted glyphs to the neutral color."""
        self._fade_after = None
        self._highlight_color = highlight_color_for(Direction.UNCHANGED, self.t)
        for tok in self._tokens:
            lbl = self._labels.get(tok.identity)
            if lbl is not None and tok.is_highlighted:
                lbl.configure(fg=self._highlight_color)
