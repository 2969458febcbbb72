from .cli.serve_cli import main

main()
