from taskboard.cli.main import main

main()
