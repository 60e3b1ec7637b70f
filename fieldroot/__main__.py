"""
Entry point for running FieldRoot as a module.

Usage:
    python -m fieldroot --help
    python -m fieldroot translate 交易日期 存款金额
    python -m fieldroot roots add 证券 sec
    python -m fieldroot roots import roots.csv
"""
from .cli import app


if __name__ == "__main__":
    app()
