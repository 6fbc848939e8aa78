"""Entry point module for executing the JSON extractor as a Python module.

This module enables running the extractor via `python -m json_extractor`,
which delegates to the CLI main function.
"""

from json_extractor.cli import main

if __name__ == "__main__":
    main()
