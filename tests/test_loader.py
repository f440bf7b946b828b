import pytest

from megastore.loader import ProductLoadError, load_products_csv, read_products_csv
from megastore.product import Product


def write(tmp_path, content, name="produtos.csv"):
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
    return path


def test_load_reads_each_line(tmp_path):
    path = write(tmp_path, "1,Notebook Gamer,Eletrônicos,MarcaX\n2,Mouse Gamer,Eletrônicos,MarcaY\n")
    assert load_products_csv(path) == [
        Product(1, "Notebook Gamer", "Eletrônicos", "MarcaX"),
        Product(2, "Mouse Gamer", "Eletrônicos", "MarcaY"),
    ]


def test_load_skips_short_lines(tmp_path):
    path = write(tmp_path, "1,Notebook,Eletrônicos\n\n2,Mouse,Eletrônicos,MarcaY\n")
    products = load_products_csv(path)
    assert [p.id for p in products] == [2]


def test_load_invalid_id_becomes_zero(tmp_path):
    path = write(tmp_path, "id,nome,categoria,marca\nabc,Mouse,Eletrônicos,MarcaY\n")
    products = load_products_csv(path)
    assert [p.id for p in products] == [0, 0]
    assert products[0].name == "nome"


def test_load_handles_crlf_and_extra_fields(tmp_path):
    path = write(tmp_path, "3,Teclado,Eletrônicos,MarcaZ,extra\r\n")
    assert load_products_csv(path) == [Product(3, "Teclado", "Eletrônicos", "MarcaZ")]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_products_csv(tmp_path / "nao_existe.csv")


def test_load_invalid_utf8_raises(tmp_path):
    path = write(tmp_path, b"1,Mouse,\xff\xfe,MarcaY\n")
    with pytest.raises(ProductLoadError):
        load_products_csv(path)


def test_read_uses_header(tmp_path):
    path = write(tmp_path, "marca,id,nome,categoria\nMarcaX,1,\"Notebook, Gamer\",Eletrônicos\n")
    assert read_products_csv(path) == [Product(1, "Notebook, Gamer", "Eletrônicos", "MarcaX")]


def test_read_round_trip_with_load(tmp_path):
    lines = ["id,nome,categoria,marca"] + [f"{n},Produto {n},Categoria {n % 5},Marca {n % 3}" for n in range(1, 20)]
    path = write(tmp_path, "\n".join(lines) + "\n")
    assert read_products_csv(path) == load_products_csv(path)[1:]


def test_read_empty_file(tmp_path):
    assert read_products_csv(write(tmp_path, "")) == []


def test_read_invalid_id_raises(tmp_path):
    path = write(tmp_path, "id,nome,categoria,marca\nx,Mouse,Eletrônicos,MarcaY\n")
    with pytest.raises(ProductLoadError):
        read_products_csv(path)


def test_read_missing_column_raises(tmp_path):
    path = write(tmp_path, "id,nome,categoria\n1,Mouse,Eletrônicos\n")
    with pytest.raises(ProductLoadError):
        read_products_csv(path)


def test_read_wrong_field_count_raises(tmp_path):
    path = write(tmp_path, "id,nome,categoria,marca\n1,Mouse,Eletrônicos\n")
    with pytest.raises(ProductLoadError):
        read_products_csv(path)