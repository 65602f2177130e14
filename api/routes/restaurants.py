"""Restaurant management routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import get_db, require_id
from domain.schemas.restaurant_schemas import (
    RestaurantCreate,
    RestaurantUpdate,
    RestaurantResponse,
)
from services.restaurant_service import RestaurantService

router = APIRouter(prefix="/restaurants", tags=["Restaurants"])


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(db: Session = Depends(get_db)):
    restaurants = RestaurantService.list_restaurants(db)
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(restaurant: RestaurantCreate, db: Session = Depends(get_db)):
    created = RestaurantService.create_restaurant(db, restaurant)
    return RestaurantResponse.model_validate(created)


@router.put("", response_model=RestaurantResponse)
def update_restaurant(restaurant: RestaurantUpdate, db: Session = Depends(get_db)):
    updated = RestaurantService.update_restaurant(db, restaurant)
    return RestaurantResponse.model_validate(updated)


@router.delete("")
def delete_restaurant(
    restaurant_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    """Delete a restaurant. Blocked while it still has menu items."""
    RestaurantService.delete_restaurant(db, require_id(restaurant_id, "Restaurant"))
    return {"success": True}
