from netpaths.cli import main

main()
