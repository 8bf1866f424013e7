from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from api.db.models import SomeEntity
from api.schemas import EntityPayload
from api.services import errors
from api.services.bulk_loader import BulkLoader
from api.services.lookup_service import LookupService

router = APIRouter(prefix="/api/test", tags=["entities"])


def _get_lookup_service(request: Request) -> LookupService:
    svc = getattr(getattr(request.app, "state", None), "lookup_service", None)
    if not svc:
        raise RuntimeError("LookupService not configured")
    return svc


def _get_bulk_loader(request: Request) -> BulkLoader:
    svc = getattr(getattr(request.app, "state", None), "bulk_loader", None)
    if not svc:
        raise RuntimeError("BulkLoader not configured")
    return svc


def _serialize(entity: SomeEntity) -> dict:
    return {"id": entity.id, "numberValue": entity.number_value, "name": entity.name}


def _store_unavailable(exc: errors.StoreError) -> HTTPException:
    return HTTPException(503, str(exc) or "Store unavailable")


def _invalid_entity(exc: errors.ValidationError) -> HTTPException:
    return HTTPException(422, {"message": str(exc), "position": exc.position, "field": exc.field})


@router.get("/jpa/simple-read")
def simple_read_repository(request: Request):
    svc = _get_lookup_service(request)
    try:
        rows = svc.find_all()
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return [_serialize(row) for row in rows]


@router.get("/entitymanager/simple-read")
def simple_read_session(request: Request):
    svc = _get_lookup_service(request)
    try:
        rows = svc.find_all_via_session()
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return [_serialize(row) for row in rows]


@router.get("/jpa/complex-query")
def complex_query_repository(request: Request, name: str = Query(..., max_length=255)):
    svc = _get_lookup_service(request)
    try:
        rows = svc.find_by_name_contains(name)
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return [_serialize(row) for row in rows]


@router.get("/entitymanager/complex-query")
def complex_query_session(request: Request, name: str = Query(..., max_length=255)):
    svc = _get_lookup_service(request)
    try:
        rows = svc.find_by_name_contains_via_session(name)
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return [_serialize(row) for row in rows]


@router.post("/jpa/batch-insert")
def batch_insert_repository(request: Request, entities: list[EntityPayload]):
    loader = _get_bulk_loader(request)
    try:
        inserted = loader.save_all([item.to_draft() for item in entities])
    except errors.ValidationError as exc:
        raise _invalid_entity(exc)
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return {"inserted": inserted}


@router.post("/entitymanager/batch-insert")
def batch_insert_session(
    request: Request,
    entities: list[EntityPayload],
    batch_size: int | None = Query(None, alias="batchSize", ge=1),
):
    loader = _get_bulk_loader(request)
    try:
        result = loader.bulk_insert([item.to_draft() for item in entities], batch_size)
    except errors.ValidationError as exc:
        raise _invalid_entity(exc)
    except errors.StoreError as exc:
        raise _store_unavailable(exc)
    return {"inserted": result.inserted, "flushes": result.flushes, "batchSize": result.batch_size}
