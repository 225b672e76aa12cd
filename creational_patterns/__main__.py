from creational_patterns.cli import main

main()
