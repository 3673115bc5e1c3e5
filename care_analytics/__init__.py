# ==============================================
# Care Recruitment Analytics
# ==============================================
#
# Package Structure (3 Topics + Report assembly):
#
# care_analytics/
# ├── normalization/    # Topic 1: Canonicalize raw rows into records
# ├── analysis/         # Topic 2: Aggregate views over record lists
# ├── sources/          # Topic 3: Fetch raw rows from the records API
# ├── datasets.py       # Owner-scoped in-memory dataset store
# ├── report.py         # Bundle every view for one dataset kind
# ├── config.py         # Configuration management
# ├── log.py            # Logging setup
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
