"""Desktop window for searching the catalogue and browsing recommendations."""

from __future__ import annotations

import os

from megastore.graph import RecommendationGraph
from megastore.index import SearchIndex
from megastore.loader import load_products_csv
from megastore.product import Product
from megastore.recommender import recommend_products
from megastore.search import filter_products, format_recommendations, format_result

__all__ = ["MegaStoreApp"]

_WINDOW_TITLE = "🛍️ MegaStore - Busca com Filtros"
_PLACEHOLDER = "Digite o nome do produto"
_BACKGROUND = "#f0f0f0"
_PLACEHOLDER_COLOUR = "#a0a0a0"
_BUTTON_COLOUR = "#4682b4"
_RECOMMENDATION_LIMIT = 3


class MegaStoreApp:
    """Catalogue loaded from a CSV file, with search, recommendations and a window."""

    def __init__(self, csv_path: str | os.PathLike[str]) -> None:
        self.products: list[Product] = load_products_csv(csv_path)
        self.index = SearchIndex()
        self.graph = RecommendationGraph()
        for product in self.products:
            self.index.add_product(product)
            self.graph.add_product(product.id)

    def search(self, name: str, category: str, brand: str) -> list[Product]:
        """Return the products matching the name, category and brand filters."""
        return filter_products(self.products, name, category, brand)

    def recommendations_for(self, position: int) -> str | None:
        """Return the recommendation text for a 1-based position in the catalogue.

        Position 0 means nothing is selected and yields an empty text; a
        position outside the catalogue yields ``None``.
        """
        if position == 0:
            return ""
        if position < 0 or position > len(self.products):
            return None
        selected = self.products[position - 1]
        recommendations = recommend_products(
            selected, self.products, _RECOMMENDATION_LIMIT
        )
        return format_recommendations(recommendations)

    def run(self) -> None:
        """Open the window and run its event loop until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title(_WINDOW_TITLE)
        root.configure(bg=_BACKGROUND)
        root.resizable(True, True)
        width, height = 700, 750
        root.update_idletasks()
        left = max((root.winfo_screenwidth() - width) // 2, 0)
        top = max((root.winfo_screenheight() - height) // 2, 0)
        root.geometry(f"{width}x{height}+{left}+{top}")

        container = tk.Frame(root, bg=_BACKGROUND)
        container.pack(fill="both", expand=True, padx=100, pady=20)

        tk.Label(
            container, text="🛍️ MegaStore", font=("TkDefaultFont", 45), bg=_BACKGROUND
        ).pack(fill="x", pady=5)

        search_row = tk.Frame(container, bg=_BACKGROUND)
        search_row.pack(fill="x", pady=5)
        tk.Label(search_row, text="🔍 Buscar:", bg=_BACKGROUND).pack(side="left")
        name_entry = tk.Entry(search_row, fg=_PLACEHOLDER_COLOUR)
        name_entry.insert(0, _PLACEHOLDER)
        name_entry.pack(side="left", fill="x", expand=True)

        def clear_placeholder(_event: object) -> None:
            if name_entry.get() == _PLACEHOLDER:
                name_entry.delete(0, "end")
                name_entry.configure(fg="black")

        name_entry.bind("<FocusIn>", clear_placeholder)

        filters = tk.Frame(container, bg=_BACKGROUND)
        filters.pack(fill="x", pady=5)
        tk.Label(filters, text="📂 Categoria:", bg=_BACKGROUND).pack(side="left")
        category_entry = tk.Entry(filters, width=20)
        category_entry.pack(side="left", padx=(0, 40))
        tk.Label(filters, text="🏷️ Marca:", bg=_BACKGROUND).pack(side="left")
        brand_entry = tk.Entry(filters, width=20)
        brand_entry.pack(side="left")

        results = tk.Listbox(container, height=6, exportselection=False)
        recommendations_box = tk.Text(container, height=9, state="disabled", wrap="word")

        def show_results() -> None:
            results.delete(0, "end")
            for product in self.search(
                name_entry.get(), category_entry.get(), brand_entry.get()
            ):
                results.insert("end", format_result(product))

        tk.Button(
            container,
            text="🔎 Buscar",
            bg=_BUTTON_COLOUR,
            fg="white",
            command=show_results,
        ).pack(fill="x", pady=5)

        results.pack(fill="x", pady=5)

        tk.Label(
            container, text="🔗 Recomendações:", font=("TkDefaultFont", 20), bg=_BACKGROUND
        ).pack(fill="x", pady=5)
        recommendations_box.pack(fill="both", expand=True, pady=5)

        def show_recommendations(_event: object) -> None:
            selection = results.curselection()
            position = selection[0] + 1 if selection else 0
            text = self.recommendations_for(position)
            if text is None:
                return
            recommendations_box.configure(state="normal")
            recommendations_box.delete("1.0", "end")
            recommendations_box.insert("1.0", text)
            recommendations_box.configure(state="disabled")

        results.bind("<<ListboxSelect>>", show_recommendations)

        root.mainloop()