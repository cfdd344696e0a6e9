"""table-check — find misused el-table-column markup in Vue single-file components."""

__version__ = "2.0.0"
