from mazebfs.animate import main

main()
