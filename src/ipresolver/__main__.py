from ipresolver.cli import main

main()
