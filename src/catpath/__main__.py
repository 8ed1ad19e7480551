from catpath.cli import main

main()
