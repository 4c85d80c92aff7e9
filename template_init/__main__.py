from template_init.cli import main

main()
