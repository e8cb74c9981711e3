"""FastAPI アプリケーション - 最終レスポンス本文の出力エンドポイント"""
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import Body, FastAPI, HTTPException, Query, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.exceptions import RunnerError
from application.ports.output import WriteMode
from application.services.last_body_writer import LastBodyWriter
from application.services.last_response_locator import LastResponseLocator
from application.services.output_error_builder import OutputErrorBuilder
from domain.exceptions import ValidationError
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.output.outputs import StdoutOutput
from infrastructure.output.stdout import Stdout
from infrastructure.result.report_models import RunResultReport


class ErrorDetailResponse(BaseModel):
    """Structured error detail"""
    code: str = Field(description="Error code")
    message: str = Field(description="Error message")
    location: Optional[str] = Field(default=None, description="Source position, if any")
    fatal: bool = Field(description="Whether the error aborts the whole run")


app = FastAPI(
    title="WebPost Last Body",
    description="実行結果の最終レスポンス本文を出力する",
    version="1.0.0",
)

OCTET_STREAM = "application/octet-stream"


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "webpost-last-body"}


def _build_writer(logger: ConsoleLogger) -> LastBodyWriter:
    return LastBodyWriter(default_output=StdoutOutput(), logger=logger)


@app.post("/last-body")
def write_last_body(
    report: RunResultReport = Body(...),
    include: bool = Query(default=False),
    color: bool = Query(default=False),
):
    """
    実行結果の最後のレスポンス本文を返す

    Args:
        report: 実行結果レポート
        include: ステータス行とヘッダを本文の前に付けるか
        color: ヘッダを端末向けに装飾するか

    Returns:
        本文のバイト列。レスポンスが無い場合は 204
    """
    logger = ConsoleLogger().bind(request_id=uuid4().hex)

    try:
        run_result = report.to_domain()
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    if LastResponseLocator().locate(run_result) is None:
        logger.info("last_body.empty_run", entries=len(run_result.entries))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    stdout = Stdout(WriteMode.BUFFERED)
    try:
        _build_writer(logger).write_last_body(
            run_result,
            include_headers=include,
            color=color,
            output=None,
            stdout=stdout,
        )
    except RunnerError as e:
        detail = OutputErrorBuilder().build_from_runner_error(e)
        return JSONResponse(
            status_code=422,
            content=ErrorDetailResponse(**detail.__dict__).model_dump(),
        )

    return Response(content=stdout.buffer(), media_type=OCTET_STREAM)
