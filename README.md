# megastore

A small product catalogue browser. It loads products from a CSV file. You can
search them by name and filter them by category and brand. For each product it
suggests related products from the same category or brand.

Searching ignores case and accents, so `eletronicos` finds `Eletrônicos`.

## Installing

```
pip install .
```

The package has no third-party runtime dependencies. The window uses Tk
(`tkinter`), which most Python installations include.

## Running

```
megastore
megastore other-products.csv
```

The `megastore` command opens the search window. With no argument it reads
`produtos.csv` from the current directory. If you pass a path, it reads that
file instead.

If the file cannot be opened or decoded, the command prints an error to
standard error and exits with status 1.

To use the window:

1. Type part of a product name, a category or a brand.
2. Press the search button.
3. Select a line in the result list to see recommendations.

The recommendations shown are those for the product at the same position in
the loaded catalogue.

## Product file

Each line holds at least four comma-separated fields:

```
1,Notebook Gamer,Eletrônicos,MarcaX
2,Mouse Gamer,Eletrônicos,MarcaY
4,Camiseta Esportiva,Vestuário,MarcaD
```

The fields are id, name, category and brand. There are two ways to read a
product file.

`megastore.loader.load_products_csv` is the reader the window uses:

- It reads plain lines and skips any line with fewer than four fields.
- It does not understand headers or quoting.
- An id that is not an unsigned 32-bit integer becomes `0`.

`megastore.loader.read_products_csv` reads a proper CSV file:

- The file must start with a header row naming the columns `id`, `nome`,
  `categoria` and `marca`.
- It raises `ProductLoadError` if a record has the wrong number of fields, if
  a column is missing, or if an id is not valid.

Both readers raise `ProductLoadError` for a file that is not UTF-8. A missing
file raises `OSError`.

## Using it from Python

```python
from megastore.loader import load_products_csv
from megastore.recommender import recommend_products
from megastore.search import filter_products, format_recommendations, format_result

products = load_products_csv("produtos.csv")

for product in filter_products(products, "gamer", "", ""):
    print(format_result(product))

recs = recommend_products(products[0], products, 3)
print(format_recommendations(recs))
```

### Recommendations

Recommendations are scored by what they share with the product:

- One point for the same category.
- One point for the same brand.

The product itself is left out, and so is any product with no points. The
highest scores come first, and ties keep catalogue order.

### Other helpers

`megastore.search` also provides `strip_accents` and `normalize`
(lower-case, then strip accents).

`megastore.gui.MegaStoreApp` wraps a loaded catalogue:

- `search(name, category, brand)` returns the matching products.
- `recommendations_for(position)` returns the recommendation text for a
  1-based catalogue position. Position 0 gives `""`, and a position out of
  range gives `None`.
- `run()` opens the window.

`megastore.index.SearchIndex` keeps a word index over product names:

```python
from megastore.index import SearchIndex

index = SearchIndex()
for product in products:
    index.add_product(product)

print(index.search("gamer"))  # ids of products with the word "gamer" in their name
```

Names are split on whitespace and lower-cased. `search` looks up the exact word
given.

## Limitations

`megastore.graph.RecommendationGraph` only records which product ids are in the
catalogue. It holds no links between products, and recommendations come only
from the category and brand scoring above. The index and the graph are built
for each catalogue, but the window's search filters the product list directly.

## Running the tests

```
pip install ".[test]"
pytest
```