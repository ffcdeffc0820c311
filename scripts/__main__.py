"""Allow `python -m scripts` by running the evaluate script."""

from scripts.evaluate import main

main()
