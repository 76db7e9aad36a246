"""A small window with a label and a button that changes the label."""

from __future__ import annotations

import argparse

TITLE = "Hello Window"
GREETING = "GTK4 Programming in C"
BUTTON_TEXT = "Click Me"
CLICKED_TEXT = "Button Clicked"


class HelloWindow:
    """A label above a flat button; clicking the button retitles the label.

    The label text is kept in :attr:`text`. Widgets are only built when a
    root window is given.
    """

    def __init__(self, root=None) -> None:
        self.text = GREETING
        self.root = root
        self._label = None
        if root is not None:
            self._build(root)

    def _build(self, root) -> None:
        import tkinter as tk

        root.title(TITLE)
        root.geometry("400x100")
        box = tk.Frame(root)
        box.pack(fill=tk.BOTH, expand=True)
        self._label = tk.Label(box, text=self.text)
        self._label.pack(side=tk.TOP, pady=1)
        tk.Button(
            box, text=BUTTON_TEXT, relief=tk.FLAT, borderwidth=0, command=self.on_click
        ).pack(side=tk.TOP, pady=1)

    def on_click(self) -> None:
        """Show that the button was clicked."""
        self.text = CLICKED_TEXT
        if self._label is not None:
            self._label.configure(text=self.text)


def main(argv: list[str] | None = None) -> int:
    """Open the hello window."""
    parser = argparse.ArgumentParser(prog="hello", description="A minimal window.")
    parser.parse_args(argv)
    import tkinter as tk

    window = HelloWindow(tk.Tk())
    window.root.mainloop()
    return 0