# product_api/models.py
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Wire key is "inStock"; only that spelling is accepted.


class ProductIn(BaseModel):
    # strict: "12" is not a price and "true" is not a boolean
    model_config = ConfigDict(strict=True, extra="ignore")

    name: StrictStr
    description: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    in_stock: StrictBool = Field(alias="inStock")


class Product(BaseModel):
    # id is declared first so it leads every serialized record
    model_config = ConfigDict(strict=True)

    id: StrictStr
    name: StrictStr
    description: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    in_stock: StrictBool = Field(alias="inStock")


def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product.model_validate({"id": product_id, **p.model_dump(by_alias=True)})
