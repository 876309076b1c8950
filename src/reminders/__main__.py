"""Entry point for running the reminder sync as a module.

Allows running with: python -m src.reminders
"""

from src.reminders.service import main

if __name__ == "__main__":
    main()
