import asyncio

from . import config
from .config import MapStyle
from . import args as args_module
from .location import Coordinate, Location
from .nearby import Failed, FetchResult, Loaded, fetch_all
from .places import Places
from .protection import ProtectionError, generate_key, load_or_create_key
from .settings import SettingsStore


def print_location(location: Location) -> None:
    print(f"{str(location.id)[:8]}  {location.name}  ({location.coordinate})")
    if location.description:
        print(f"          {location.description}")


def print_nearby(title: str, result: FetchResult) -> None:
    print(f"\nNearby {title}...")
    if isinstance(result, Loaded):
        if not result.pages:
            print("  Nothing found nearby.")
        for page in result.pages:
            print(f"  {page.title}: {page.description}")
    elif isinstance(result, Failed):
        print("  Please try again later.")
    else:
        print("  Loading...")


def open_places(key) -> Places:
    """Unlock the saved places with key, or with the key file when none is given."""
    if key is None:
        key = load_or_create_key(config.key_path())
    try:
        return Places(config.save_path(), key=key)
    except ProtectionError as e:
        print(f"Error: {e}")
        exit(1)


def find_or_exit(places: Places, key: str) -> Location:
    location = places.find(key)
    if location is None:
        print(f"Error: no single saved place matches '{key}'.")
        exit(1)
    return location


async def run_nearby(args, places: Places) -> None:
    if args.all:
        locations = places.current_locations()
        if not locations:
            print("No saved places to look up.")
            return
        results, _ = await fetch_all(locations, config.max_concurrent)
        for location in locations:
            print_nearby(location.name, results[location.id])
        return

    if args.at:
        try:
            coordinate = Coordinate(latitude=args.at[0], longitude=args.at[1])
        except ValueError as e:
            print(f"Error: invalid coordinate: {e}")
            exit(1)
        title = str(coordinate)
    else:
        location = find_or_exit(places, args.id)
        coordinate = location.coordinate
        title = location.name

    print(f"Fetching nearby pages for {title}")
    print_nearby(title, await places.fetch_nearby(coordinate))


async def main(argv=None):
    args = args_module.setup_config(argv)

    if args.command == "keygen":
        print(generate_key().decode("ascii"))
        return

    if args.command == "style":
        settings = SettingsStore(config.settings_path())
        if args.style is not None:
            settings.map_style = MapStyle(args.style)
        print(f"Map style: {settings.map_style.value}")
        return

    places = open_places(args.key)

    if args.command == "list":
        locations = places.current_locations()
        if not locations:
            print("No saved places yet.")
        for location in locations:
            print_location(location)

    elif args.command == "add":
        try:
            coordinate = Coordinate(latitude=args.latitude, longitude=args.longitude)
        except ValueError as e:
            print(f"Error: invalid coordinate: {e}")
            exit(1)
        print_location(places.add_location(coordinate))

    elif args.command == "edit":
        location = find_or_exit(places, args.id)
        places.set_selected(location)
        edited = location.edited(name=args.name, description=args.description, reissue_id=args.new_id)
        if places.update_selected(edited):
            print_location(edited)
        else:
            print(f"Error: '{args.id}' is no longer saved.")
            exit(1)

    elif args.command == "nearby":
        await run_nearby(args, places)

    last_save = places.store.last_save
    if last_save is not None and not last_save.ok:
        print(f"Warning: changes were not saved to {last_save.path}")
        exit(1)


if __name__ == "__main__":
    asyncio.run(main())
