from braille_view.cli.main import main

main()
