from .schema_to_ts_client import schema_to_ts_client

if __name__ == "__main__":
    schema_to_ts_client()
