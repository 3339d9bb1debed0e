"""
Main script to play Othello in the console.
"""
from othello.cli import main

if __name__ == "__main__":
    main()
