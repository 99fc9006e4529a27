"""CIE constants used by the LAB and LUV conversions."""

# Exact rational forms (CIE 15:2004 recommendation)
CIE_E = 216.0 / 24389.0
CIE_K = 24389.0 / 27.0
CIE_E_TIMES_K = CIE_E * CIE_K  # == 8.0
