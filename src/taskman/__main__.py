# src/taskman/__main__.py

from taskman.cli.main import main

main()
