"""Allow ``python -m lolbench_compare``."""

from lolbench_compare.cli import main

main()
