from doomish.adapters.textual.app import main

main()
