from graph_algos.cli import main

if __name__ == "__main__":
    main()
