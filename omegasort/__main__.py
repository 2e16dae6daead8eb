from omegasort.cli import main

main()
