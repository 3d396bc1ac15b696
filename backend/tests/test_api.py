def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["languages"] == 2


def test_list_countries_defaults_to_english(client):
    response = client.get("/countries")
    assert response.status_code == 200
    first = response.json()[0]
    assert first == {
        "code": "CA",
        "name": "Canada",
        "continent": "Americas",
        "areaInKm2": 9984670,
        "population": 36624199,
        "capital": "Ottawa",
    }


def test_list_countries_in_french(client):
    response = client.get("/countries", params={"language": "French"})
    assert [c["name"] for c in response.json()][:3] == ["Canada", "Estonie", "Gabon"]


def test_unsupported_language_is_404(client):
    response = client.get("/countries", params={"language": "Klingon"})
    assert response.status_code == 404
    assert "Klingon" in response.json()["detail"]


def test_languages_and_continents(client):
    assert client.get("/countries/languages").json() == ["English", "French"]
    assert "Asia" in client.get("/countries/continents").json()


def test_population_range(client):
    response = client.get(
        "/countries/population",
        params={"min_population": 1000000, "max_population": 2000000},
    )
    assert response.status_code == 200
    assert [c["code"] for c in response.json()] == ["GA"]


def test_population_zero_max(client):
    bounded = client.get(
        "/countries/population", params={"min_population": 1000000, "max_population": 0}
    )
    unbounded = client.get("/countries/population", params={"min_population": 1000000})
    assert bounded.json() == unbounded.json()


def test_continent_area(client):
    response = client.get("/countries/continent/Americas", params={"min_area": 1000000})
    assert [c["code"] for c in response.json()] == ["CA", "MX"]

    response = client.get("/countries/continent/Nowhere", params={"min_area": 0})
    assert response.status_code == 200
    assert response.json() == []


def test_continent_area_requires_min_area(client):
    response = client.get("/countries/continent/Americas")
    assert response.status_code == 422


def test_menu(client):
    items = client.get("/menu").json()
    assert items[0]["id"] == "english"

    table = client.get("/menu/asia_all").json()
    assert table["count"] == 2
    assert table["rows"][0]["flag"] == {"src": "flags/bh.png", "alt": "BH"}


def test_menu_rows_html(client):
    response = client.get("/menu/population_1m_2m/rows")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<td>Gabon</td>" in response.text


def test_unknown_menu_item_is_404(client):
    assert client.get("/menu/nope").status_code == 404
    assert client.get("/menu/nope/rows").status_code == 404
