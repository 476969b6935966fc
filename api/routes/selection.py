"""
API routes for selection preview and commit.
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.dependencies import get_cart, get_selection_session
from api.models.selection import (
    CommitRefusedResponse,
    CommitRequest,
    CommitResponse,
    SelectionRequest,
    SelectionResponse,
)
from core.checkout import InMemoryCart
from core.pricing import (
    build_line_item_description,
    compute_total_price,
    compute_unit_price,
    resolve_base_price,
)
from core.session import SelectionSession
from core.violations import ViolationDetector
from utils.logging import setup_logger

logger = setup_logger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["selection"],
    responses={404: {"description": "Product or option not found"}},
)


def _replay(session: SelectionSession, request: SelectionRequest) -> None:
    session.apply_all((a.action, a.group_id, a.option_id) for a in request.actions)


@router.post("/{product_id}/selection", response_model=SelectionResponse)
async def preview_selection(
    product_id: str,
    request: SelectionRequest,
    session: SelectionSession = Depends(get_selection_session),
):
    """
    Replay the given actions on an empty selection and report the result.

    Never refuses: violations are returned so the form can show them, and
    prices are only included when the selection is valid.
    """
    logger.info(
        f"Previewing {len(request.actions)} selection actions for product '{product_id}'"
    )
    _replay(session, request)

    violations = session.violations()
    result = {
        "success": True,
        "product_id": product_id,
        "valid": not violations,
        "selection": session.selection.to_list(),
        "violations": [v.to_dict() for v in violations],
        "summary": ViolationDetector.get_violations_summary(violations),
    }

    if not violations:
        product = session.product
        base_price = resolve_base_price(product.price, product.promotional_price)
        result["unit_price"] = compute_unit_price(base_price, session.selection)
        result["total_price"] = compute_total_price(
            base_price, session.selection, request.quantity
        )
        result["description"] = build_line_item_description(
            product.name, session.selection
        )

    return result


@router.post(
    "/{product_id}/commit",
    response_model=CommitResponse,
    responses={422: {"model": CommitRefusedResponse}},
)
async def commit_selection(
    product_id: str,
    request: CommitRequest,
    session: SelectionSession = Depends(get_selection_session),
    cart: InMemoryCart = Depends(get_cart),
):
    """
    Validate the selection and add the priced line item to the cart.
    """
    _replay(session, request)
    result = session.commit(
        quantity=request.quantity, cart=cart, observations=request.observations
    )

    if not result.success:
        logger.info(f"Refused commit for product '{product_id}': {result.error}")
        return JSONResponse(
            status_code=422,
            content=jsonable_encoder(
                {
                    "success": False,
                    "error": result.error,
                    "violations": [v.to_dict() for v in result.violations],
                }
            ),
        )

    return {
        "success": True,
        "line_item": result.line_item.to_dict(),
        "total_price": result.total_price,
        "cart_entry_id": result.cart_entry_id,
    }
