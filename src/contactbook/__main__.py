"""Run: python -m contactbook"""

from contactbook.cli import main

if __name__ == "__main__":
    main()
