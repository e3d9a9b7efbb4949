"""
Census Tract Dashboard — Configuration: paths, file naming, parsing constants, user groups.
"""
import os
import re
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with CENSUS_DATA_DIR / CENSUS_REPORTS_DIR for deployment
# ---------------------------------------------------------------------------
DATA_FOLDER = Path(os.environ.get("CENSUS_DATA_DIR", str(Path.cwd() / "data")))
REPORTS_FOLDER = Path(os.environ.get("CENSUS_REPORTS_DIR", str(DATA_FOLDER / "reports")))

# ---------------------------------------------------------------------------
# Resource naming
# ---------------------------------------------------------------------------
CATALOG_FILENAME = "TablesNamesList.csv"

# ACS 2022 5-year extract for the selected Baltimore City tracts.
# The dataset code appears twice: table id and file suffix.
DATASET_FILE_TEMPLATE = "acs2022_5yr_{code}_14000US24510190200_{code}.csv"

# ---------------------------------------------------------------------------
# Table parsing
# ---------------------------------------------------------------------------
UNIT_LABEL_RE = re.compile(r"Census Tract (\d+)")
UNIT_PREFIX = "tract"

# Row labels that are aggregates or metadata, never categories
EXCLUDED_CATEGORIES = {"Total:", "Estimate"}

# Cells outside the signed 64-bit range are treated as unparseable
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------
DEFAULT_CHART_TYPE = "bar"

# Golden-angle hue step keeps neighbouring series visually distinct
COLOR_HUE_STEP = 137.508
COLOR_SATURATION = 70
COLOR_LIGHTNESS = 50

# ---------------------------------------------------------------------------
# User groups (first group is the default and lists every dataset)
# ---------------------------------------------------------------------------
USER_GROUPS = [
    {
        "name": "All Users",
        "datasets": [
            "B08303", "B11016", "B14001", "B15003", "B17020", "B18101", "B19001",
            "B23025", "B25001", "B25002", "C24010", "B01001", "B02001", "B08134",
        ],
        "description": "Includes all user groups and datasets.",
    },
    {
        "name": "1. Residential Users",
        "datasets": ["B01001", "B02001", "B11016", "B25001", "B25002"],
        "description": "Residents (long-term), Renters, Homeowners, Families, "
                       "Young professionals, Seniors/Retirees",
    },
    {
        "name": "2. Community Service Users",
        "datasets": ["B17020", "B18101", "B14001", "B23025"],
        "description": "Community group participants, Healthcare seekers, "
                       "Low-income individuals and families",
    },
    {
        "name": "3. Recreational Users",
        "datasets": ["B01001", "B02001", "B19001"],
        "description": "Park and green space visitors, Fitness enthusiasts, Cultural event attendees",
    },
    {
        "name": "4. Transit Users",
        "datasets": ["B08303", "B08134", "C24010"],
        "description": "Public transportation users, Pedestrians, Cyclists",
    },
    {
        "name": "5. Economic Users",
        "datasets": ["B17020", "B19001", "B23025"],
        "description": "Shoppers and retail customers, Visitors and tourists",
    },
    {
        "name": "6. Workforce",
        "datasets": ["B23025", "C24010", "B15003"],
        "description": "Commuters, Workers (local and from surrounding areas), Job seekers, "
                       "Small business owners and entrepreneurs",
    },
    {
        "name": "7. Special Populations",
        "datasets": ["B01001", "B02001", "B18101"],
        "description": "People with disabilities, Immigrants and non-native English speakers",
    },
]
DEFAULT_GROUP = USER_GROUPS[0]["name"]
