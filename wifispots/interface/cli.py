import argparse
import sys
from dataclasses import replace
from enum import Enum

from wifispots.app.use_cases.admin_auth import AdminAuthUseCase
from wifispots.app.use_cases.browse_places import BrowsePlacesUseCase, PlaceDetailsUseCase
from wifispots.app.use_cases.manage_places import ManagePlacesUseCase, PlaceForm
from wifispots.app.use_cases.submit_review import RatingAggregator, SubmitReviewUseCase
from wifispots.core.errors import AuthorizationError, NotFoundError, WifiSpotsError
from wifispots.core.filters import FilterCriteria, HoursBucket, PlaceType, SortMode, WifiQuality
from wifispots.infrastructure.persistence.sql.admin_repository import SqlAdminRepository
from wifispots.infrastructure.persistence.sql.db import SqlDatabase
from wifispots.infrastructure.persistence.sql.place_repository import SqlPlaceRepository
from wifispots.infrastructure.persistence.sql.review_repository import SqlReviewRepository
from wifispots.infrastructure.storage.photo_store import LocalPhotoStore
from wifispots.utils.config import Settings
from wifispots.utils.logging import setup_logging



class Container:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.db = SqlDatabase.from_url(settings.database_url)
        self.places = SqlPlaceRepository(self.db)
        self.reviews = SqlReviewRepository(self.db)
        self.admins = SqlAdminRepository(self.db)
        self.photos = LocalPhotoStore(settings.images_dir)
        self.aggregator = RatingAggregator(self.places, self.reviews)
        self.auth = AdminAuthUseCase(self.admins, settings.admin_user, settings.admin_password)

    def close(self):
        self.db.close()


def build_container(dburl: str | None = None) -> Container:
    settings = Settings.from_env()
    if dburl:
        settings = replace(settings, database_url=dburl)
    return Container(settings)


def _enum_or_text(enum_cls: type[Enum], value: str | None, default: Enum):
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _choices_help(enum_cls) -> str:
    return ", ".join(f"{m.value} ({m.label})" for m in enum_cls) + ", or any stored label"


def _add_admin_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--admin-user", required=True)
    p.add_argument("--admin-password", required=True)


def _add_place_args(p: argparse.ArgumentParser, required: bool) -> None:
    p.add_argument("--name", required=required)
    p.add_argument("--type", required=required)
    p.add_argument("--address", required=required)
    p.add_argument("--wifi", required=required)
    p.add_argument("--hours", required=required, help='"HH:MM-HH:MM" or "Round the clock"')
    p.add_argument("--contact", required=required)
    p.add_argument("--description", default=None)
    p.add_argument("--photo", default=None, help="Path to a .jpg/.jpeg/.png/.bmp image")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wi-Fi friendly places catalog")
    ap.add_argument("--db", default=None, help="SQLAlchemy database URL")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("init-db")

    p = sub.add_parser("list")
    p.add_argument("--search", default=None)
    p.add_argument("--type", default=None, help=_choices_help(PlaceType))
    p.add_argument("--wifi", default=None, help=_choices_help(WifiQuality))
    p.add_argument("--hours", default=None, help=_choices_help(HoursBucket))
    p.add_argument("--sort", choices=[s.value for s in SortMode], default=SortMode.NATURAL.value)

    p = sub.add_parser("show")
    p.add_argument("place_id", type=int)

    p = sub.add_parser("review")
    p.add_argument("place_id", type=int)
    p.add_argument("--stars", type=int, choices=range(1, 6), default=3)
    p.add_argument("--author", default="")
    p.add_argument("--comment", default="")

    p = sub.add_parser("add-place")
    _add_place_args(p, required=True)
    _add_admin_args(p)

    p = sub.add_parser("edit-place")
    p.add_argument("place_id", type=int)
    _add_place_args(p, required=False)
    _add_admin_args(p)

    p = sub.add_parser("delete-place")
    p.add_argument("place_id", type=int)
    _add_admin_args(p)

    p = sub.add_parser("register-admin")
    p.add_argument("--username", required=True)
    p.add_argument("--password", required=True)
    p.add_argument("--confirm", required=True)

    sub.add_parser("recompute-ratings")
    return ap


def _require_admin(c: Container, args) -> None:
    if not c.auth.login(args.admin_user, args.admin_password):
        raise AuthorizationError("Invalid login or password.")


def _print_place_row(p) -> None:
    print(f"#{p.id} {p.name} | {p.type} | {p.address} | Wi-Fi: {p.wifi_quality} | {p.work_hours} | {p.rating:.1f}")


def _run(c: Container, args) -> None:
    if args.cmd == "init-db":
        print(f"Database ready: {c.settings.database_url}")

    elif args.cmd == "list":
        criteria = FilterCriteria(
            search=args.search,
            place_type=_enum_or_text(PlaceType, args.type, PlaceType.ALL),
            wifi=_enum_or_text(WifiQuality, args.wifi, WifiQuality.ANY),
            hours=_enum_or_text(HoursBucket, args.hours, HoursBucket.ANY),
            sort=SortMode(args.sort),
        )
        places = BrowsePlacesUseCase(c.places).run(criteria)
        for p in places:
            _print_place_row(p)
        print(f"{len(places)} place(s)")

    elif args.cmd == "show":
        d = PlaceDetailsUseCase(c.places, c.reviews).run(args.place_id)
        p = d.place
        print(p.name)
        print(f"  Contact: {p.contact}")
        print(f"  Hours:   {p.work_hours}")
        print(f"  Wi-Fi:   {p.wifi_quality}")
        print(f"  Rating:  {p.rating:.1f}")
        if p.description:
            print(f"  {p.description}")
        if p.photo_path:
            print(f"  Photo:   {p.photo_path}")
        print(f"Reviews ({len(d.reviews)}):")
        for r in d.reviews:
            when = r.created_at.strftime("%Y-%m-%d %H:%M") if r.created_at else "-"
            print(f"  [{when}] {r.author}: {'*' * r.stars} {r.comment}")

    elif args.cmd == "review":
        r = SubmitReviewUseCase(c.places, c.reviews, c.aggregator).run(
            args.place_id, args.stars, author=args.author, comment=args.comment
        )
        print(f"Review #{r.id} added.")

    elif args.cmd == "add-place":
        _require_admin(c, args)
        place = ManagePlacesUseCase(c.places, c.photos).create(
            PlaceForm(
                name=args.name,
                type=args.type,
                address=args.address,
                wifi_quality=args.wifi,
                work_hours=args.hours,
                contact=args.contact,
                description=args.description or "",
                photo=args.photo,
            )
        )
        print(f"Place #{place.id} added.")

    elif args.cmd == "edit-place":
        _require_admin(c, args)
        current = c.places.get_by_id(args.place_id)
        if current is None:
            raise NotFoundError(f"Place #{args.place_id} not found.")
        form = PlaceForm(
            name=args.name if args.name is not None else current.name,
            type=args.type if args.type is not None else current.type,
            address=args.address if args.address is not None else current.address,
            wifi_quality=args.wifi if args.wifi is not None else current.wifi_quality,
            work_hours=args.hours if args.hours is not None else current.work_hours,
            contact=args.contact if args.contact is not None else current.contact,
            description=args.description if args.description is not None else current.description,
            photo=args.photo,
        )
        ManagePlacesUseCase(c.places, c.photos).update(args.place_id, form)
        print(f"Place #{args.place_id} saved.")

    elif args.cmd == "delete-place":
        _require_admin(c, args)
        ManagePlacesUseCase(c.places, c.photos).delete(args.place_id)
        print(f"Place #{args.place_id} deleted.")

    elif args.cmd == "register-admin":
        c.auth.register(args.username, args.password, args.confirm)
        print("Registration successful.")

    elif args.cmd == "recompute-ratings":
        n = c.aggregator.recompute_all()
        print(f"Recomputed ratings for {n} place(s).")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    c = None
    try:
        c = build_container(args.db)
        setup_logging(c.settings.log_level)
        _run(c, args)
        return 0
    except WifiSpotsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if c is not None:
            c.close()


if __name__ == "__main__":
    sys.exit(main())
