import os
import sys
from dotenv import load_dotenv

from db import init_db, get_db
from diagnosis.seed import seed_demo_school

load_dotenv()

SCHOOL_ID = sys.argv[1] if len(sys.argv) > 1 else os.getenv("DEMO_SCHOOL_ID", "demo-school")


def main():
    init_db()
    with get_db() as db:
        rows = seed_demo_school(db, SCHOOL_ID)
        print(f"Seeded school {SCHOOL_ID}:")
        for kind, items in rows.items():
            print(f"  {kind}: {len(items)}")


if __name__ == "__main__":
    main()
