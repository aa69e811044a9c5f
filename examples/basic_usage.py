"""Basic usage example for scd-access."""
from scd_access import SCDClient, Config, SCDError, new_scr_template


def main():
    # Local mode returns canned records, no server needed
    print("Initializing client in local mode...")
    client = SCDClient(Config(service_url="https://scd.example.org", topic="3d", local=True))

    # Example 1: Discover content around a location
    print("\n=== Example 1: Contents at location ===")
    records = client.get_contents_at_location(None, None, "8928308280fffff")
    for i, scr in enumerate(records, 1):
        position = scr.content.geopose.position
        print(f"{i}. {scr.content.title} ({scr.id})")
        print(f"   at {position.lat}, {position.lon}, h={position.h}")

    # Example 2: Build and publish a new record
    print("\n=== Example 2: Publish a record ===")
    record = new_scr_template()
    record["content"].update(id="bench-1", type="3d", title="Park bench")
    record["content"]["geopose"]["position"] = {"lon": 13.4049, "lat": 52.52, "h": 34.5}

    try:
        print(f"Server answered: {client.post_content(None, None, record, 'token')}")
    except SCDError as e:
        print(f"Publishing failed: {e}")


if __name__ == "__main__":
    main()
