"""
Search sitters in a region and print each one with its avatar.

    KIDSOUT_API_KEY=... python examples/search_sitters.py
"""
import logging

from kidsout import KidsoutApiError, KidsoutClient, KidsoutValidationError

logging.basicConfig(level=logging.INFO)


def main() -> None:
    with KidsoutClient() as client:
        regions = client.get_region_models()
        for region in regions:
            place = region.default_place
            print(f"{region.id}: {region.attributes.name} ({place.attributes.address if place else 'no default place'})")

        try:
            sitters = client.search_sitter_models(
                region_id=int(regions[0].id) if regions else None,
                per_page=5,
                sort="-kidsout_score",
                include=["avatars", "inaccurate_location"],
            )
        except KidsoutValidationError as e:
            for issue in e.validation_issues:
                print(f"- {issue}")
            return
        except KidsoutApiError as e:
            print(f"API error: {e}")
            return

        for sitter in sitters:
            avatar = sitter.avatar
            location = sitter.inaccurate_location
            print(
                sitter.id,
                sitter.attributes.first_name,
                avatar.attributes.url if avatar else "-",
                (location.attributes.latitude, location.attributes.longitude) if location else "-",
            )


if __name__ == "__main__":
    main()
