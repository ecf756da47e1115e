"""Before/after change-detection pipeline."""

import logging
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Dict, Optional, Tuple, Union

from models.change_detection_result import ChangeDetectionResult
from models.detection_params import DetectionParams
from models.encoded_image import EncodedImage
from models.errors import CancelledError, FetchTimeoutError
from models.raster import IndexRaster
from engines.raster_decoder import decode_image
from engines.vegetation_index import compute_index
from engines.change_detector import detect_change
from engines.visualization_encoder import encode_visualization
from engines.image_source import (
    FetchResult, ImageSourceProvider, PlaceholderImage, classify_source_bytes
)
from utils.metrics import Timer, compute_index_stats

logger = logging.getLogger(__name__)

ImageInput = Union[EncodedImage, bytes]

# Poll interval while waiting on a provider, so cancellation is noticed.
_FETCH_POLL_S = 0.05


def _as_encoded(image: ImageInput) -> EncodedImage:
    if isinstance(image, EncodedImage):
        return image
    return EncodedImage.from_bytes(bytes(image))


def _check_cancelled(cancel_event: Optional[threading.Event], stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise CancelledError(f"Change detection cancelled before {stage}")


class ChangeDetectionPipeline:
    """Decode -> index (both inputs, concurrently) -> detect -> encode.

    Holds only immutable params; one instance may serve concurrent runs.
    """

    def __init__(self, params: Optional[DetectionParams] = None):
        self.params = params or DetectionParams()

    def prepare(
        self,
        image: ImageInput,
        label: str = 'image',
        cancel_event: Optional[threading.Event] = None
    ) -> Tuple[IndexRaster, Dict[str, float]]:
        """Decode one input and compute its index raster."""
        timer = Timer()
        grid = timer.measure(
            f'decode_{label}', decode_image, _as_encoded(image),
            self.params.canonical_width, self.params.canonical_height,
            self.params.interpolation, self.params.fit
        )
        _check_cancelled(cancel_event, f'{label} index')
        index = timer.measure(f'index_{label}', compute_index, grid, self.params.epsilon)
        return index, timer.timings_ms

    def run(
        self,
        before: ImageInput,
        after: ImageInput,
        cancel_event: Optional[threading.Event] = None
    ) -> ChangeDetectionResult:
        """Compare two images. Stage errors propagate unchanged."""
        before_image = _as_encoded(before)
        after_image = _as_encoded(after)
        _check_cancelled(cancel_event, 'decode')

        placeholders = [
            label for label, image in (('before', before_image), ('after', after_image))
            if not image.is_raster
        ]
        if placeholders:
            logger.warning(f"No imagery available for: {', '.join(placeholders)}")
            return self._no_data_result(before_image, after_image, placeholders)

        timer = Timer()
        workers = min(2, self.params.max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='prepare') as executor:
            before_future = executor.submit(self.prepare, before_image, 'before', cancel_event)
            after_future = executor.submit(self.prepare, after_image, 'after', cancel_event)
            before_index, before_timings = before_future.result()
            after_index, after_timings = after_future.result()

        for stage, elapsed in {**before_timings, **after_timings}.items():
            timer.record(stage, elapsed)

        _check_cancelled(cancel_event, 'change detection')
        classification = timer.measure(
            'detect', detect_change, before_index, after_index, self.params.loss_threshold
        )

        _check_cancelled(cancel_event, 'visualization')
        visualization = timer.measure('encode', encode_visualization, classification.visualization)

        _check_cancelled(cancel_event, 'result')
        logger.info(
            f"Change detection complete: {classification.loss_percent:.2f}% loss "
            f"({classification.loss_pixel_count}/{classification.total_pixel_count} pixels), "
            f"severity {classification.severity}, {timer.total_ms:.1f} ms"
        )

        return ChangeDetectionResult(
            status='ok',
            before_image=before_image,
            after_image=after_image,
            loss_percent=classification.loss_percent,
            loss_pixel_count=classification.loss_pixel_count,
            total_pixel_count=classification.total_pixel_count,
            severity=classification.severity,
            loss_threshold=classification.loss_threshold,
            visualization_image=visualization,
            index_stats={
                'before': compute_index_stats(before_index.values),
                'after': compute_index_stats(after_index.values),
            },
            timings_ms=dict(timer.timings_ms),
        )

    def run_from_source(
        self,
        provider: ImageSourceProvider,
        location_id: str,
        before_date: str,
        after_date: str,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> ChangeDetectionResult:
        """Fetch both dates from a provider, then compare.

        Placeholder results short-circuit to a no-data outcome. Provider
        errors propagate; exceeding timeout raises FetchTimeoutError.
        """
        fetched = self._fetch_pair(provider, location_id, before_date, after_date, timeout, cancel_event)
        before, after = fetched['before'], fetched['after']

        placeholders = [
            label for label, result in (('before', before), ('after', after))
            if isinstance(result, PlaceholderImage)
        ]
        if placeholders:
            for label in placeholders:
                logger.warning(
                    f"{label} imagery for {location_id} unavailable: {fetched[label].reason}"
                )
            return self._no_data_result(before.image, after.image, placeholders)

        return self.run(before.image, after.image, cancel_event)

    def _fetch_pair(
        self,
        provider: ImageSourceProvider,
        location_id: str,
        before_date: str,
        after_date: str,
        timeout: Optional[float],
        cancel_event: Optional[threading.Event]
    ) -> Dict[str, FetchResult]:
        _check_cancelled(cancel_event, 'fetch')
        deadline = None if timeout is None else time.monotonic() + timeout

        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='fetch')
        try:
            futures = {
                'before': executor.submit(provider.fetch, location_id, before_date),
                'after': executor.submit(provider.fetch, location_id, after_date),
            }
            pending = set(futures.values())
            while pending:
                _check_cancelled(cancel_event, 'fetch completed')
                wait_for = _FETCH_POLL_S
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise FetchTimeoutError(
                            f"Imagery for {location_id} not received within {timeout}s"
                        )
                    wait_for = min(wait_for, remaining)
                done, pending = wait(pending, timeout=wait_for, return_when=FIRST_EXCEPTION)
                for future in done:
                    if future.exception() is not None:
                        raise future.exception()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        _check_cancelled(cancel_event, 'decode')
        results = {}
        for label, future in futures.items():
            result = future.result()
            if isinstance(result, (bytes, bytearray)):
                result = classify_source_bytes(bytes(result))
            results[label] = result
        return results

    def _no_data_result(
        self,
        before_image: EncodedImage,
        after_image: EncodedImage,
        placeholders
    ) -> ChangeDetectionResult:
        return ChangeDetectionResult(
            status='no_data',
            before_image=before_image,
            after_image=after_image,
            loss_threshold=self.params.loss_threshold,
            placeholder_inputs=list(placeholders),
        )


def run_change_detection(
    before: ImageInput,
    after: ImageInput,
    loss_threshold: Optional[float] = None,
    params: Optional[DetectionParams] = None,
    cancel_event: Optional[threading.Event] = None
) -> ChangeDetectionResult:
    """Compare two encoded images with an optional per-call threshold."""
    params = params or DetectionParams()
    if loss_threshold is not None:
        params = params.with_threshold(loss_threshold)
    return ChangeDetectionPipeline(params).run(before, after, cancel_event)
