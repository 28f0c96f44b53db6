"""Process-wide tuning settings for the search routines."""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("knowhere")


class SimdType(enum.Enum):
    """Instruction set level to use for distance computations."""

    AUTO = "AUTO"
    AVX512 = "AVX512"
    AVX2 = "AVX2"
    SSE4_2 = "SSE4_2"
    GENERIC = "GENERIC"


class ClusteringType(enum.Enum):
    """Centroid initialisation used when training clusters."""

    K_MEANS = "K_MEANS"
    K_MEANS_PLUS_PLUS = "K_MEANS_PLUS_PLUS"


_SIMD_FLAGS = {
    SimdType.AUTO: (True, True, True),
    SimdType.AVX512: (True, True, True),
    SimdType.AVX2: (False, True, True),
    SimdType.SSE4_2: (False, False, True),
    SimdType.GENERIC: (False, False, False),
}


@dataclass
class KnowhereConfig:
    """Mutable settings shared by the search routines."""

    use_avx512: bool = True
    use_avx2: bool = True
    use_sse4_2: bool = True
    blas_threshold: int = 20
    early_stop_threshold: float = 0.0
    clustering_type: ClusteringType = ClusteringType.K_MEANS
    version: Optional[str] = None
    gpu: bool = False
    debug: bool = False

    def set_simd_type(self, simd_type: SimdType) -> str:
        """Select the instruction set level and return the name of the one in use."""
        self.use_avx512, self.use_avx2, self.use_sse4_2 = _SIMD_FLAGS[SimdType(simd_type)]
        logger.info("FAISS expect simdType::%s", SimdType(simd_type).value)
        if self.use_avx512:
            simd_str = "AVX512"
        elif self.use_avx2:
            simd_str = "AVX2"
        elif self.use_sse4_2:
            simd_str = "SSE4_2"
        else:
            simd_str = "GENERIC"
        logger.info("FAISS hook %s", simd_str)
        return simd_str

    def set_blas_threshold(self, value: int) -> None:
        """Set the query count above which distances are computed with BLAS."""
        logger.info("Set faiss::distance_compute_blas_threshold to %s", value)
        self.blas_threshold = int(value)

    def set_early_stop_threshold(self, value: float) -> None:
        """Set the relative improvement below which clustering stops early."""
        logger.info("Set faiss::early_stop_threshold to %s", value)
        self.early_stop_threshold = float(value)

    def set_clustering_type(self, clustering_type: ClusteringType) -> None:
        """Choose the clustering initialisation; anything unknown means K_MEANS."""
        logger.info("Set faiss::clustering_type to %s", clustering_type)
        if clustering_type == ClusteringType.K_MEANS_PLUS_PLUS:
            self.clustering_type = ClusteringType.K_MEANS_PLUS_PLUS
        else:
            self.clustering_type = ClusteringType.K_MEANS

    def version_message(self) -> str:
        """Log and return the version banner."""
        msg = "Knowhere Version: "
        if self.version is not None:
            msg += self.version
            if self.gpu:
                msg += "-gpu"
        else:
            msg += " unknown"
        if self.debug:
            msg += " (DEBUG)"
        logger.info(msg)
        return msg


_config: Optional[KnowhereConfig] = None
_config_lock = threading.Lock()


def get_config() -> KnowhereConfig:
    """The process-wide settings object."""
    global _config
    with _config_lock:
        if _config is None:
            _config = KnowhereConfig()
        return _config