import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from sources.models import (  # noqa: E402
    DisasterRecord,
    DisturbanceRecord,
    RegionCrimeRecord,
    Snapshot,
    TopCrimeTypeRecord,
)


CRIME_PAYLOAD = [
    {
        "polda": "Polda Metro Jaya",
        "total": 300,
        "lat": -6.2,
        "lon": 106.8,
        "jenis": [{"nama": f"Type {i}", "jumlah": 100 - i} for i in range(1, 8)],
        "top_polres": [
            {"nama": "Polres Jakarta Barat", "lat": -6.17, "lon": 106.76, "jumlah": 120,
             "jenis": [{"nama": "Narkotika", "jumlah": 40}]},
            {"nama": "Polres Jakarta Timur", "lat": -6.22, "lon": 106.9, "jumlah": 90, "jenis": []},
            {"nama": "Polres Tanpa Lokasi", "lat": None, "lon": None, "jumlah": 5, "jenis": []},
        ],
    },
    {
        "polda": "Polda Jawa Timur",
        "total": 500,
        "lat": -7.25,
        "lon": 112.75,
        "jenis": [{"nama": "Narkotika", "jumlah": 80}],
        "top_polres": [
            {"nama": "Polrestabes Surabaya", "lat": -7.26, "lon": 112.74, "jumlah": 200, "jenis": []},
        ],
    },
    {
        "polda": "Polda Papua",
        "total": 100,
        "lat": None,
        "lon": 140.7,
        "jenis": [],
        "top_polres": [],
    },
]

DISTURBANCE_PAYLOAD = [
    {"polda": "Polda Metro Jaya", "lat": -6.2, "lon": 106.8, "kejadian": 12, "jenis": "Unjuk Rasa"},
    {"polda": "Polda Bali", "lat": None, "lon": None, "kejadian": 3, "jenis": "Tawuran"},
]

DISASTER_PAYLOAD = [
    {"polda": "Polda Jawa Barat", "lat": -6.91, "lon": 107.61, "kejadian": 4, "jenis": "Banjir",
     "keterangan": "Musim hujan"},
]

BOUNDARY_PAYLOAD = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "properties": {"nama": "Kota Bandung"},
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[107.55, -6.86], [107.7, -6.86], [107.7, -6.97], [107.55, -6.86]]],
            },
        }
    ],
}


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def payloads():
    return {
        "kriminalitas.json": CRIME_PAYLOAD,
        "gangguan.json": DISTURBANCE_PAYLOAD,
        "bencana.json": DISASTER_PAYLOAD,
        "top5.json": [{"wilayah": "Polda Jawa Timur", "jumlah": 500, "lat": -7.25, "lon": 112.75}],
        "tren.json": [{"tahun": 2022, "jumlah": 10}, {"tahun": 2023, "jumlah": 12}],
        "persen_kekerasan.json": [{"kategori": "Kekerasan", "persen": 23.4}],
        "batasKab.json": BOUNDARY_PAYLOAD,
        "10besar.json": [{"nama": "Penipuan", "jumlah": 5}],
    }


@pytest.fixture
def crime_records():
    return tuple(RegionCrimeRecord.from_dict(raw) for raw in CRIME_PAYLOAD)


@pytest.fixture
def snapshot(crime_records):
    return Snapshot(
        crime=crime_records,
        disturbance=tuple(DisturbanceRecord.from_dict(raw) for raw in DISTURBANCE_PAYLOAD),
        disaster=tuple(DisasterRecord.from_dict(raw) for raw in DISASTER_PAYLOAD),
        boundaries=BOUNDARY_PAYLOAD,
        top_crime_types=(
            TopCrimeTypeRecord(name="Penipuan", count=5),
            TopCrimeTypeRecord(name="Narkotika", count=20),
            TopCrimeTypeRecord(name="Penganiayaan", count=10),
        ),
    )
