from dotenv import load_dotenv
load_dotenv(".env")

from valorant_api.cli import main

if __name__ == "__main__":
    main()
