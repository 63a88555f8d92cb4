"""
ROI Service
===========
Business logic for saved ROI calculations.
"""

from typing import List, Dict, Optional, Any

from pricing_engine import ROI_INPUT_KEYS, calculate_roi


class ROIService:
    """
    Service for ROI calculation persistence.
    """

    def __init__(self, db_handler):
        self.db = db_handler

    def list_calculations(self, user_id: str) -> List[Dict[str, Any]]:
        return self.db.get_roi_calculations(user_id)

    def save_calculation(
        self,
        user_id: str,
        name: str,
        inputs: Dict[str, float],
        platform_ids: Optional[List[str]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Recalculate outputs from inputs and save both.

        Args:
            user_id: User ID
            name: Calculation name (required)
            inputs: ROI calculator inputs; every key must be present and non-negative
            platform_ids: Platforms the calculation was made for

        Returns:
            Saved row or None if validation fails
        """
        if not name or not name.strip():
            return None
        if any(key not in inputs for key in ROI_INPUT_KEYS):
            return None
        if any(inputs[key] < 0 for key in ROI_INPUT_KEYS):
            return None

        outputs = calculate_roi(inputs)
        clean_inputs = {key: inputs[key] for key in ROI_INPUT_KEYS}
        return self.db.create_roi_calculation(user_id, name.strip(), clean_inputs, outputs, platform_ids)

    def delete_calculation(self, calculation_id: str, user_id: str) -> bool:
        return self.db.delete_roi_calculation(calculation_id, user_id)
