from gitstats.cli import main

main()
