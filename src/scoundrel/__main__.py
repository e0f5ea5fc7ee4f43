from scoundrel.cli.play import main

main()
