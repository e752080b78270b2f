#!/usr/bin/env python3
"""Example usage of the geoc library."""

from geoc import LOCATION_LAT, Coord, GeocException, location_display_name, parse_coord, parse_point


def main():
    print("geoc Library Demo")
    print("=" * 17)

    # Parse coordinates in several notations
    print("\n1. Parsing:")
    for text in ("48°33'26.9604\"N", "48-33.4493N", "120-5749E", "-48.557489"):
        coord = parse_coord(text)
        print(f"{text} -> {coord.value:.6f} ({location_display_name(coord.loc)})")

    # Format by example
    print("\n2. Formatting:")
    coord = Coord(-48.5575, LOCATION_LAT)
    for template in ("48°33'27\"N", "48-33.0N", "48,5575"):
        print(f"{coord.value} as {template} -> {coord.format(template)}")

    # Points
    print("\n3. Points:")
    point = parse_point("48-33-27N; 120-57-49E")
    print(f"Default: {point}")
    formatted = point.format("48°33'27\"N", "120-5749E", "; ")
    print(f"DMS: {formatted}")

    # Errors
    print("\n4. Errors:")
    try:
        parse_coord("-48N")
    except GeocException as e:
        print(f"{type(e).__name__}: {e}")

    print("\nDemo completed!")


if __name__ == "__main__":
    main()
