# =============================================================================
# core/landmarks.py  —  Landmark Catalog (marker source + detail lookup)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Backs the two concave Earth tools:
#     - search()  → the marker set and initial camera for the globe widget
#     - details() → the full record behind a clicked marker
#
# MOCK DATA:
#   A handful of built-in landmarks, picked to exercise the projector:
#   both hemispheres, high latitude (London), the equator (Nairobi),
#   ocean-heavy views (Great Barrier Reef) and a terrain feature (Andes).
#
# EXTERNAL MARKERS:
#   The caller may pass its own marker list (e.g. places it got from a maps
#   tool).  Entries without an id get one synthesized as
#   "google-{index}-{slug}", and every entry is tagged with placeholder
#   provenance facts so the details panel has something to say.
#
# SESSION SCOPING:
#   The markers from the latest import are remembered so details() can find
#   them later; each new import replaces the previous set.
#   That memory lives on a LandmarkCatalog instance, one per MCP session
#   (see CatalogRegistry), never in a module-level table.  Two clients
#   can't see each other's imported markers.
#
# NO EXCEPTIONS FOR MISSES:
#   An unknown id returns an "Unknown location" record, and a filter that
#   matches nothing returns zero markers with the camera still anchored on
#   the first unfiltered item.
# =============================================================================

import logging
import re
from collections import OrderedDict
from typing import Any, Iterable, Optional

from core.geometry import clamp_lat, wrap_lng
from core.models import CameraState, ConcaveEarthView, LandmarkDetails
from core.settings import DEFAULT_TUNING, ViewTuning

logger = logging.getLogger(__name__)

VIEW_TITLE = "Concave Earth Navigator"

UNKNOWN_FACTS = ["No landmark details found."]

PROVENANCE_FACTS = [
    "Imported from an external maps result supplied by the calling agent.",
    "Coordinates are shown as provided and have not been verified.",
]


# -----------------------------------------------------------------------------
# Built-in landmarks
# -----------------------------------------------------------------------------
_LANDMARKS: list[LandmarkDetails] = [
    LandmarkDetails(
        id="sf",
        name="San Francisco",
        country="United States",
        type="city",
        lat=37.7749,
        lng=-122.4194,
        facts=[
            "Known for steep streets and layered waterfront topography.",
            "Neighborhoods are geographically compact, which makes it a good map UX benchmark.",
        ],
    ),
    LandmarkDetails(
        id="seoul",
        name="Seoul",
        country="South Korea",
        type="city",
        lat=37.5665,
        lng=126.978,
        facts=[
            "Dense transit network and high POI density make filtering demos useful.",
            "A good stress-test for marker clustering behavior.",
        ],
    ),
    LandmarkDetails(
        id="nairobi",
        name="Nairobi",
        country="Kenya",
        type="city",
        lat=-1.2921,
        lng=36.8219,
        facts=[
            "Sits almost on the equator, so it checks equatorial perspective handling.",
            "Strong contrast between the urban center and surrounding natural zones.",
        ],
    ),
    LandmarkDetails(
        id="london",
        name="London",
        country="United Kingdom",
        type="city",
        lat=51.5072,
        lng=-0.1276,
        facts=[
            "The Thames curve is recognizable even in stylized map themes.",
            "Useful for checking high-latitude balance in northern hemisphere views.",
        ],
    ),
    LandmarkDetails(
        id="andes",
        name="Andes Backbone",
        country="South America",
        type="terrain",
        lat=-19.0154,
        lng=-65.2619,
        facts=[
            "Represents long mountain-chain scale for distance and ratio storytelling.",
            "Good for comparing city-to-terrain proportions inside a spherical projection.",
        ],
    ),
    LandmarkDetails(
        id="greatbarrierreef",
        name="Great Barrier Reef",
        country="Australia",
        type="terrain",
        lat=-18.2871,
        lng=147.6992,
        facts=[
            "Exercises ocean-heavy camera views and sparse marker sets.",
            "A strong example of non-urban mapping context.",
        ],
    ),
]


def builtin_landmarks() -> list[LandmarkDetails]:
    return list(_LANDMARKS)


def unknown_landmark(landmark_id: str) -> LandmarkDetails:
    return LandmarkDetails(
        id=landmark_id,
        name="Unknown location",
        country="Unknown",
        type="unknown",
        lat=0,
        lng=0,
        facts=list(UNKNOWN_FACTS),
    )


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase, hyphen-separated: "Great Barrier Reef!" → "great-barrier-reef"."""
    slug = _NON_ALNUM.sub("-", name.lower()).strip("-")
    return slug or "location"


def _matches(item: LandmarkDetails, term: str) -> bool:
    return (
        term in item.name.lower()
        or term in item.country.lower()
        or term in item.type.lower()
    )


# -----------------------------------------------------------------------------
# LandmarkCatalog — one session's view of the world
# -----------------------------------------------------------------------------
class LandmarkCatalog:
    """Marker source and detail lookup for a single client session."""

    def __init__(
        self,
        landmarks: Optional[Iterable[LandmarkDetails]] = None,
        tuning: ViewTuning = DEFAULT_TUNING,
    ):
        self._builtin = {item.id: item for item in (landmarks or _LANDMARKS)}
        self._source = list(self._builtin.values())
        self._imported: dict[str, LandmarkDetails] = {}
        self.tuning = tuning

    def import_markers(self, raw_markers: Iterable[dict[str, Any]]) -> list[LandmarkDetails]:
        """Turn caller-supplied marker dicts into landmarks and remember them.

        Entries with missing or non-numeric coordinates are skipped.  Each
        call replaces the markers remembered from the previous one.
        """
        self._imported = {}
        imported = []
        for index, raw in enumerate(raw_markers):
            try:
                lat = float(raw["lat"])
                lng = float(raw["lng"])
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping external marker %d without usable lat/lng: %r", index, raw)
                continue

            name = str(raw.get("name") or "Unnamed place")
            landmark_id = str(raw.get("id") or f"google-{index}-{slugify(name)}")
            landmark = LandmarkDetails(
                id=landmark_id,
                name=name,
                country=str(raw.get("country") or "Unknown"),
                type=str(raw.get("type") or "place"),
                lat=lat,
                lng=wrap_lng(lng),
                facts=list(PROVENANCE_FACTS),
            )
            self._imported[landmark_id] = landmark
            imported.append(landmark)
        return imported

    def search(
        self,
        focus: Optional[str] = None,
        external: Optional[Iterable[dict[str, Any]]] = None,
    ) -> ConcaveEarthView:
        """Build the globe widget props.

        Args:
            focus: Optional keyword; case-insensitive substring match over
                name, country and type.
            external: Optional caller-supplied markers.  When given, they
                replace the built-in landmarks as the source.

        Returns:
            A ConcaveEarthView.  The camera looks at the first match, or at
            the first unfiltered source item when nothing matches.
        """
        source = self.import_markers(external) if external is not None else self._source

        term = (focus or "").strip().lower()
        results = [item for item in source if not term or _matches(item, term)]

        anchor = results[0] if results else (source[0] if source else None)
        camera = CameraState(fov=self.tuning.default_fov)
        if anchor is not None:
            camera.lat = clamp_lat(anchor.lat, self.tuning.lat_limit)
            camera.lng = wrap_lng(anchor.lng)

        return ConcaveEarthView(
            title=VIEW_TITLE,
            focus=focus or "",
            camera=camera,
            markers=[item.to_marker() for item in results],
        )

    def details(self, landmark_id: str) -> LandmarkDetails:
        """Full record for an id.  Never raises; misses get the unknown record."""
        found = self._imported.get(landmark_id) or self._builtin.get(landmark_id)
        if found is None:
            return unknown_landmark(landmark_id)
        return LandmarkDetails(
            id=found.id,
            name=found.name,
            country=found.country,
            type=found.type,
            lat=found.lat,
            lng=found.lng,
            facts=list(found.facts),
        )

    async def fetch_details(self, landmark_id: str) -> LandmarkDetails:
        """Awaitable form of details(), for ViewSession."""
        return self.details(landmark_id)


# -----------------------------------------------------------------------------
# CatalogRegistry — session key → LandmarkCatalog
# -----------------------------------------------------------------------------
class CatalogRegistry:
    """Keeps one LandmarkCatalog per session, evicting the oldest past a cap."""

    def __init__(self, max_sessions: int = 256, tuning: ViewTuning = DEFAULT_TUNING):
        self.max_sessions = max_sessions
        self.tuning = tuning
        self._catalogs: "OrderedDict[str, LandmarkCatalog]" = OrderedDict()

    def for_session(self, session_key: str) -> LandmarkCatalog:
        catalog = self._catalogs.get(session_key)
        if catalog is None:
            catalog = LandmarkCatalog(tuning=self.tuning)
            self._catalogs[session_key] = catalog
            while len(self._catalogs) > self.max_sessions:
                evicted, _ = self._catalogs.popitem(last=False)
                logger.info("Evicted landmark catalog for session %s", evicted)
        else:
            self._catalogs.move_to_end(session_key)
        return catalog

    def discard(self, session_key: str) -> None:
        self._catalogs.pop(session_key, None)

    def __len__(self) -> int:
        return len(self._catalogs)

    def __contains__(self, session_key: str) -> bool:
        return session_key in self._catalogs
