import pytest

from megastore.index import SearchIndex
from megastore.product import Product


def sample_products():
    return [
        Product(1, "Notebook Gamer", "Eletrônicos", "MarcaX"),
        Product(2, "Mouse Gamer", "Eletrônicos", "MarcaY"),
        Product(3, "Teclado Mecânico", "Eletrônicos", "MarcaZ"),
        Product(4, "Camiseta Esportiva", "Vestuário", "MarcaD"),
    ]


@pytest.fixture
def index():
    idx = SearchIndex()
    for product in sample_products():
        idx.add_product(product)
    return idx


def test_search_by_name_in_large_catalogue():
    idx = SearchIndex()
    for n in range(5000):
        idx.add_product(Product(n, f"Produto {n}", f"Categoria {n % 50}", f"Marca {n % 30}"))
    result = idx.search("2500")
    assert result
    assert result == [2500]
    assert len(idx.search("produto")) == 5000


def test_word_shared_by_several_products(index):
    assert index.search("gamer") == [1, 2]


def test_single_word(index):
    assert index.search("notebook") == [1]
    assert index.search("mecânico") == [3]


def test_term_is_matched_exactly(index):
    assert index.search("Gamer") == []
    assert index.search("game") == []
    assert index.search("notebook gamer") == []


def test_unknown_term_gives_empty_list(index):
    assert index.search("geladeira") == []


def test_repeated_word_indexes_id_each_time():
    idx = SearchIndex()
    idx.add_product(Product(9, "Gamer Gamer", "Eletrônicos", "MarcaX"))
    assert idx.search("gamer") == [9, 9]


def test_result_is_a_copy(index):
    result = index.search("gamer")
    result.append(99)
    assert index.search("gamer") == [1, 2]