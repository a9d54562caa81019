"""Pytest configuration and shared fixtures."""

import json

import pytest

SAMPLE_CAFES = [
    {
        "id": 1,
        "name": "Cộng Cà Phê Hai Bà Trưng",
        "address": "152D Hai Bà Trưng, Đa Kao",
        "district": "Quận 1",
        "cafe_types": ["静か", "作業向き"],
        "price_range": "cheap",
        "distance_km": 1.2,
        "amenities": ["Wi-Fi", "コンセント"],
        "rating": 4.5,
    },
    {
        "id": 2,
        "name": "The Workshop Coffee",
        "address": "27 Ngô Đức Kế",
        "district": "Quận 1",
        "cafe_types": ["作業向き"],
        "price_range": "moderate",
        "distance_km": 3.0,
        "amenities": ["Wi-Fi", "Wi-Fi安定", "長時間OK"],
        "rating": 4.7,
    },
    {
        "id": 3,
        "name": "Cà Phê Mèo Đà Nẵng",
        "address": "Bạch Đằng, Hải Châu",
        "district": "Hải Châu",
        "cafe_types": ["猫カフェ"],
        "price_range": "moderate",
        "distance_km": 8.5,
        "amenities": ["禁煙"],
        "rating": 4.1,
    },
    {
        "id": 4,
        "name": "Résumé Bar",
        "address": "12 Lý Tự Trọng",
        "district": "Quận 3",
        "cafe_types": ["会話向き"],
        "price_range": "expensive",
        "amenities": ["屋外席"],
        "rating": 3.9,
    },
]

SAMPLE_REVIEWS = [
    {
        "id": "r1",
        "cafeId": 1,
        "username": "lan",
        "rating": 5,
        "drinkRating": 5,
        "foodRating": 4,
        "serviceRating": 4,
        "atmosphereRating": 5,
        "text": "Cà phê cốt dừa rất ngon",
        "date": "2024-05-01",
        "timestamp": 1714521600000,
    },
    {
        "id": "r2",
        "cafeId": 2,
        "username": "lan",
        "drinkRating": 3,
        "foodRating": 3,
        "serviceRating": 4,
        "atmosphereRating": 4,
    },
    {
        "id": "r3",
        "cafeId": 1,
        "username": "minh",
        "drinkRating": 2,
        "foodRating": 2,
        "serviceRating": 2,
        "atmosphereRating": 2,
    },
]


@pytest.fixture
def cafes():
    from cafefinder.cafes.catalog import parse_cafes

    return parse_cafes(SAMPLE_CAFES)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "cafes.json"
    path.write_text(
        json.dumps(SAMPLE_CAFES, ensure_ascii=False), encoding="utf-8"
    )
    return path


@pytest.fixture
def reviews_file(tmp_path):
    path = tmp_path / "reviews.json"
    path.write_text(
        json.dumps(SAMPLE_REVIEWS, ensure_ascii=False), encoding="utf-8"
    )
    return path
