from .cli import python3_config

if __name__ == "__main__":
    python3_config()
