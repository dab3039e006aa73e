import os

from playhouse.db_url import connect

# Default to a SQLite file in the working directory
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Initialize the database connection
db = connect(DATABASE_URL)
