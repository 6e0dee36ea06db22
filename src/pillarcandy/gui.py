from __future__ import annotations

import threading
import tkinter as tk
from tkinter import ttk

from pillarcandy.riksdagen.client import RiksdagenClient
from pillarcandy.riksdagen.lookup import lookup_law, render_result


def search_text(query: str, client: RiksdagenClient | None = None) -> str:
    """Text shown in the result area for a query."""
    return render_result(lookup_law(query, client=client, mode="text"))


def post_to_ui(master, callback) -> bool:
    """Schedule callback on the Tk thread; False if the window is already gone."""
    try:
        master.after(0, callback)
    except (RuntimeError, tk.TclError):
        # main loop has exited (window closed mid-lookup)
        return False
    return True


class App(ttk.Frame):
    def __init__(self, master, client: RiksdagenClient | None = None):
        ttk.Frame.__init__(self, master, padding=20)
        self.master.title("PillarCandy")
        self.grid(sticky="nsew")

        self.client = client
        self.search_var = tk.StringVar()

        self._build_ui()

    def _build_ui(self):
        self.master.columnconfigure(0, weight=1)
        self.master.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        search_row = ttk.Frame(self)
        search_row.grid(row=0, column=0, sticky="ew", pady=(0, 20))
        search_row.columnconfigure(0, weight=1)

        entry = ttk.Entry(search_row, textvariable=self.search_var)
        entry.grid(row=0, column=0, sticky="ew", padx=(0, 20))
        entry.bind("<Return>", lambda _evt: self._run_search())
        entry.focus_set()

        self.search_btn = ttk.Button(search_row, text="Search", command=self._run_search)
        self.search_btn.grid(row=0, column=1, sticky="w")

        output_frame = ttk.Frame(self)
        output_frame.grid(row=1, column=0, sticky="nsew")
        self.output = tk.Text(output_frame, wrap="word", height=30, state="disabled")
        self.output.pack(side="left", fill="both", expand=True)
        scrollbar = ttk.Scrollbar(output_frame, command=self.output.yview)
        scrollbar.pack(side="right", fill="y")
        self.output.configure(yscrollcommand=scrollbar.set)

        self._set_output("Search for law, e.g. 1998:899")

    def _set_busy(self, busy):
        self.search_btn.configure(state="disabled" if busy else "normal")

    def _set_output(self, text):
        self.output.configure(state="normal")
        self.output.delete("1.0", "end")
        self.output.insert("1.0", text)
        self.output.configure(state="disabled")

    def _run_search(self):
        query = self.search_var.get()
        self._set_busy(True)
        self._set_output("Searching...")

        # lookup_law blocks; keep it off the Tk thread
        def task():
            try:
                text = search_text(query, client=self.client)
            except Exception as exc:
                text = f"Error: {exc}"
            post_to_ui(self.master, lambda: self._finish(text))

        threading.Thread(target=task, daemon=True).start()

    def _finish(self, text):
        self._set_output(text)
        self._set_busy(False)


def main() -> int:
    root = tk.Tk()
    root.geometry("900x700")
    App(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
