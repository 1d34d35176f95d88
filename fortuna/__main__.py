from fortuna.cli import main

main()
