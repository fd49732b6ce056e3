from tracker.api.cli import main

main()
