from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..settings import settings
from .errors import LocalizationScanError
from .models import (
    DefinitionsRequest,
    DefinitionsResponse,
    MissingKeysRequest,
    MissingKeysResponse,
    ParseResultResponse,
    ScanDirectoryRequest,
    ScanFileRequest,
)
from .service import LuaLocalizationParser


router = APIRouter(prefix="/localization", tags=["Localization"])


_PARSER = LuaLocalizationParser()


def get_parser() -> LuaLocalizationParser:
    return _PARSER


@router.post("/scan/file", response_model=ParseResultResponse)
async def scan_file(req: ScanFileRequest, parser: LuaLocalizationParser = Depends(get_parser)):
    try:
        result = await parser.scan_file_async(req.path)
    except LocalizationScanError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ParseResultResponse.from_result(result)


@router.post("/scan/directory", response_model=ParseResultResponse)
async def scan_directory(req: ScanDirectoryRequest, parser: LuaLocalizationParser = Depends(get_parser)):
    exclude = settings.excluded_subdirs if req.exclude_subdirs is None else req.exclude_subdirs
    try:
        result = await parser.scan_directory_async(req.path, exclude)
    except LocalizationScanError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ParseResultResponse.from_result(result)


@router.post("/definitions", response_model=DefinitionsResponse)
async def definitions(req: DefinitionsRequest, parser: LuaLocalizationParser = Depends(get_parser)):
    try:
        defined = await parser.scan_definition_files_async(req.paths)
    except LocalizationScanError as e:
        raise HTTPException(status_code=404, detail=str(e))
    keys = sorted(defined, key=str.casefold)
    return DefinitionsResponse(keys=keys, total=len(keys))


@router.post("/missing", response_model=MissingKeysResponse)
async def missing_keys(req: MissingKeysRequest, parser: LuaLocalizationParser = Depends(get_parser)):
    definition_files = settings.definition_files if req.definition_files is None else req.definition_files
    exclude = settings.excluded_subdirs if req.exclude_subdirs is None else req.exclude_subdirs
    try:
        report = await parser.find_missing_keys_async(req.directory, definition_files, exclude)
    except LocalizationScanError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MissingKeysResponse.from_report(report)
