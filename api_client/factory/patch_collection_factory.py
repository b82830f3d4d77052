from api_client.entity.order import Order
from api_client.entity.patch import Patch, PatchCollection
from api_client.entity.purchase_unit import PurchaseUnit


def _comparable(unit: PurchaseUnit) -> dict:
    # PayPal owns the payments block; it is never patched
    data = unit.to_dict()
    data.pop("payments", None)
    return data


class PatchCollectionFactory:
    def from_orders(self, from_order: Order, to_order: Order) -> PatchCollection:
        """Patches that turn the purchase units of from_order into to_order's."""
        patches = []
        for unit in to_order.purchase_units:
            path = f"/purchase_units/@reference_id=='{unit.reference_id}'"
            previous = from_order.purchase_unit(unit.reference_id)
            value = _comparable(unit)
            if previous is None:
                patches.append(Patch(op="add", path=path, value=value))
            elif _comparable(previous) != value:
                patches.append(Patch(op="replace", path=path, value=value))
        return PatchCollection(patches=tuple(patches))
