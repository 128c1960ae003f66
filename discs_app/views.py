import json

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from discs_app.models import LaserDisc
from discs_app.services.collection_service import CollectionService, LaserDiscAlreadyExistsError
from discs_app.services.lookup_service import LookupService

SOURCE = "lddb.com"

DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 100

INTEGER_FIELDS = {"year", "sides", "runtime"}
BOOLEAN_FIELDS = {"watched"}


def _parse_json_body(request: HttpRequest) -> dict | None:
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _invalid_field(data: dict) -> str | None:
    """Name of the first field whose JSON type does not match the model, if any."""
    for field, value in data.items():
        if field in INTEGER_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                return field
        elif field in BOOLEAN_FIELDS:
            if not isinstance(value, bool):
                return field
        elif not isinstance(value, str):
            return field
    return None


@require_GET
def lookup_by_upc(request, upc):
    """Look up a UPC on lddb.com, noting whether it is already in the collection."""
    upc = upc.strip()
    if not upc:
        return JsonResponse({"error": "UPC parameter is required"}, status=400)

    result = LookupService().lookup_by_upc(upc)

    if not result.found:
        return JsonResponse(
            {"message": "LaserDisc not found", "upc": upc, "source": SOURCE, "error": result.error},
            status=404,
        )

    response = {"source": SOURCE, "result": result.to_dict()}

    existing = CollectionService().get_by_upc(upc)
    if existing:
        response["existing"] = existing.to_dict()
        response["message"] = "LaserDisc found in LDDB (also exists in local collection)"
    else:
        response["message"] = "LaserDisc information found in LDDB"

    return JsonResponse(response)


@require_GET
def lookup_by_reference(request, reference):
    reference = reference.strip()
    if not reference:
        return JsonResponse({"error": "Reference parameter is required"}, status=400)

    result = LookupService().lookup_by_reference(reference)

    if not result.found:
        return JsonResponse(
            {"message": "LaserDisc not found", "reference": reference, "source": SOURCE, "error": result.error},
            status=404,
        )

    return JsonResponse(
        {
            "message": "LaserDisc information found by reference",
            "source": SOURCE,
            "reference": reference,
            "result": result.to_dict(),
        }
    )


@csrf_exempt
@require_http_methods(["GET", "POST"])
def collection(request):
    if request.method == "POST":
        return _add_laserdisc(request)
    return _list_collection(request)


def _list_collection(request):
    service = CollectionService()

    try:
        limit = int(request.GET.get("limit", DEFAULT_PAGE_LIMIT))
    except ValueError:
        limit = 0
    if limit < 1 or limit > MAX_PAGE_LIMIT:
        return JsonResponse({"error": f"Invalid limit parameter (1-{MAX_PAGE_LIMIT})"}, status=400)

    try:
        offset = int(request.GET.get("offset", 0))
    except ValueError:
        offset = -1
    if offset < 0:
        return JsonResponse({"error": "Invalid offset parameter"}, status=400)

    search = request.GET.get("search", "")
    laserdiscs = service.search(search) if search else service.list_all()

    return JsonResponse(
        {
            "laserdiscs": [ld.to_dict() for ld in laserdiscs[offset:offset + limit]],
            "pagination": {"total": len(laserdiscs), "limit": limit, "offset": offset},
            "stats": service.stats(),
        }
    )


def _add_laserdisc(request):
    data = _parse_json_body(request)
    if data is None:
        return JsonResponse({"error": "Invalid request format"}, status=400)

    if not data.get("upc") or not data.get("title"):
        return JsonResponse({"error": "Invalid request format", "details": "upc and title are required"}, status=400)

    invalid = _invalid_field(data)
    if invalid:
        return JsonResponse({"error": "Invalid request format", "details": f"Invalid value for '{invalid}'"}, status=400)

    try:
        laserdisc = CollectionService().create(data)
    except LaserDiscAlreadyExistsError as e:
        return JsonResponse({"error": str(e)}, status=409)

    return JsonResponse(
        {"message": "LaserDisc added to collection", "laserdisc": laserdisc.to_dict()},
        status=201,
    )


@csrf_exempt
@require_http_methods(["PUT", "DELETE"])
def laserdisc_detail(request, laserdisc_id):
    service = CollectionService()

    if request.method == "DELETE":
        try:
            service.delete(laserdisc_id)
        except LaserDisc.DoesNotExist:
            return JsonResponse({"error": "LaserDisc not found"}, status=404)
        return JsonResponse({"message": "LaserDisc deleted successfully"})

    data = _parse_json_body(request)
    if data is None:
        return JsonResponse({"error": "Invalid request format"}, status=400)

    invalid = _invalid_field(data)
    if invalid:
        return JsonResponse({"error": "Invalid request format", "details": f"Invalid value for '{invalid}'"}, status=400)

    try:
        laserdisc = service.update(laserdisc_id, data)
    except LaserDisc.DoesNotExist:
        return JsonResponse({"error": "LaserDisc not found"}, status=404)

    return JsonResponse({"message": "LaserDisc updated successfully", "laserdisc": laserdisc.to_dict()})


@csrf_exempt
@require_POST
def toggle_watched(request, laserdisc_id):
    try:
        laserdisc = CollectionService().toggle_watched(laserdisc_id)
    except LaserDisc.DoesNotExist:
        return JsonResponse({"error": "LaserDisc not found"}, status=404)

    status = "watched" if laserdisc.watched else "unwatched"
    return JsonResponse({"message": f"LaserDisc marked as {status}", "laserdisc": laserdisc.to_dict()})


@require_GET
def random_unwatched(request):
    laserdisc = CollectionService().random_unwatched()
    if not laserdisc:
        return JsonResponse({"error": "No unwatched LaserDiscs found in collection"}, status=404)

    return JsonResponse({"message": "Random unwatched LaserDisc selected", "laserdisc": laserdisc.to_dict()})
