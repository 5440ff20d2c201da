import pathlib

FIXTURES_PATH = (pathlib.Path(__file__).resolve().parent) / "fixtures"

EXAMPLE_TEXT = (
    "low low low low low lowest lowest newer newer newer newer newer newer "
    "wider wider wider new new"
)
