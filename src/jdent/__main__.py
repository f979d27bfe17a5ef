from jdent.cli import main

main()
