from fitness_tracker.cli import main

main()
