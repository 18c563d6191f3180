from tree_generator.generate_tree import main

main()
