"""Fixed policy values and reference data."""

from datetime import date

CANONICAL_SIZE = 512

# Calibrated against the two-band greenness proxy, not true NDVI.
LOSS_THRESHOLD = -0.2
INDEX_EPSILON = 1e-6

# Visualization level for diff == 0
NO_CHANGE_LEVEL = 127

# (lower bound, label), checked top-down with strict '>'
SEVERITY_BANDS = (
    (20.0, 'critical'),
    (10.0, 'high'),
    (5.0, 'moderate'),
)
DEFAULT_SEVERITY = 'low'

PNG_COMPRESSION_LEVEL = 6

SENTINEL2_LAUNCH_DATE = date(2015, 6, 23)

# [lon_min, lat_min, lon_max, lat_max], EPSG:4326
FOREST_BBOXES = {
    "Mau Forest Complex": (35.14800, -1.05000, 36.14800, -0.05000),
    "Aberdare Forest": (36.53250, -0.63000, 36.93250, -0.23000),
    "Kakamega Forest": (34.80330, 0.19600, 34.92330, 0.31600),
    "Mount Kenya Forest": (37.00840, -0.17500, 37.60840, 0.42500),
    "Arabuko-Sokoke Forest": (39.76670, -3.43333, 39.96670, -3.23333),
    "Karura Forest": (36.81333, -1.25333, 36.85333, -1.21333),
    "Ngong Hills (Ngong Forest)": (36.66100, -1.40200, 36.76100, -1.30200),
    "Chyulu Hills": (37.50000, -2.70000, 37.90000, -2.30000),
    "Mount Elgon Forest": (34.33300, 0.70800, 34.93300, 1.30800),
    "Shimba Hills": (39.30780, -4.33720, 39.46780, -4.17720),
    "Ngare Ndare Forest": (37.58300, 0.03300, 37.68300, 0.13300),
    "Loita Forest": (35.30000, -1.20000, 35.70000, -0.80000),
    "Cherangani Hills Forest": (34.70000, 0.20000, 35.30000, 0.80000),
    "Nandi Forests": (35.01670, 0.01670, 35.21670, 0.21670),
    "Kereita Forest": (36.67670, -1.14000, 36.75670, -1.06000),
    "Eburu Forest": (36.06670, -0.38330, 36.16670, -0.28330),
    "Ololua Forest": (36.70670, -1.32670, 36.72670, -1.30670),
    "Kaya Kinondo": (39.30000, -4.39000, 39.34000, -4.35000),
}
