from transliterator.cli import main

main()
