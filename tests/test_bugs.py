import pytest


def test_bugs_starts_at_99(client):
    response = client.get("/bugs")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "99 little bugs in the code" in html
    assert '<a href="/bugs/101">Pull one down, patch it around</a>' in html


def test_bugs_count_under_limit(client):
    html = client.get("/bugs/99").get_data(as_text=True)

    assert html == ('99 little bugs in the code'
                    '<br><a href="/bugs/101">Pull one down, patch it around</a>')


@pytest.mark.parametrize("count, next_link", [("200", "/bugs/202"), ("1.5", "/bugs/3.5"), ("-7", "/bugs/-5")])
def test_bugs_next_link(client, count, next_link):
    assert f'href="{next_link}"' in client.get(f"/bugs/{count}").get_data(as_text=True)


def test_bugs_over_limit_starts_over(client):
    html = client.get("/bugs/250").get_data(as_text=True)

    assert "250 little bugs in the code" in html
    assert '<a href="/">Start over</a>' in html
    assert "/bugs/252" not in html


def test_non_numeric_bugs_become_nan(client):
    response = client.get("/bugs/lots")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "NaN little bugs in the code" in html
    assert 'href="/bugs/NaN"' in html


def test_start_over_redirects_to_bugs(client):
    response = client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/bugs")


@pytest.mark.parametrize("count", ["infinity", "١٢"])
def test_non_js_number_spellings_become_nan(client, count):
    assert "NaN little bugs in the code" in client.get(f"/bugs/{count}").get_data(as_text=True)


def test_huge_count_uses_exponent_notation(client):
    html = client.get("/bugs/1e21").get_data(as_text=True)

    assert "1e+21 little bugs in the code" in html
    assert '<a href="/">Start over</a>' in html
