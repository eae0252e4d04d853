"""
CDC Advisor — clock-domain-crossing synchronization recommendations.
"""

from __future__ import annotations

from hdlguard.models.guidance_models import CDCGuidance, CDCRecommendation, SignalType

GENERAL_GUIDELINES: tuple[str, ...] = (
    "Never cross multi-bit buses without proper synchronization",
    "Use gray code for counters and pointers",
    "Always use at least two flops for synchronization",
    "Consider metastability recovery time (MTBF)",
    "Use async FIFOs for high-bandwidth data transfers",
    "Verify CDC paths with formal tools (Jasper, VC Formal)",
)

TOOL_RECOMMENDATIONS: tuple[str, ...] = (
    "Synopsys SpyGlass CDC verification",
    "Cadence JasperGold CDC",
    "Real Intent Meridian CDC",
)

TWO_FLOP_SYNCHRONIZER = CDCRecommendation(
    scenario="Single-bit CDC crossing",
    solution="Use a two-flop synchronizer",
    example="""
// Two-flop synchronizer for single-bit signal
reg sync_ff1, sync_ff2;

always @(posedge clk_dest or negedge rst_n) begin
  if (!rst_n) begin
    sync_ff1 <= 1'b0;
    sync_ff2 <= 1'b0;
  end else begin
    sync_ff1 <= signal_from_source_domain;
    sync_ff2 <= sync_ff1;
  end
end

assign synced_signal = sync_ff2;""",
)

GRAY_CODE_BUS = CDCRecommendation(
    scenario="Multi-bit bus crossing",
    solution="Use Gray code encoding or handshake protocol",
    example="""
// Gray code counter for CDC
function [N-1:0] bin2gray;
  input [N-1:0] bin;
  begin
    bin2gray = bin ^ (bin >> 1);
  end
endfunction

// In source domain
gray_counter <= bin2gray(binary_counter);

// In destination domain (synchronize each bit)
always @(posedge clk_dest) begin
  gray_sync1 <= gray_counter;
  gray_sync2 <= gray_sync1;
end""",
)

TOGGLE_HANDSHAKE_BUS = CDCRecommendation(
    scenario="Data bus with enable signal",
    solution="Use toggle-based or handshake protocol",
    example="""
// Handshake protocol for data bus
// Source domain
always @(posedge clk_src) begin
  if (data_valid && !req) begin
    req <= ~req;  // Toggle request
    data_reg <= data;
  end
end

// Destination domain
always @(posedge clk_dest) begin
  req_sync1 <= req;
  req_sync2 <= req_sync1;
  req_sync3 <= req_sync2;

  if (req_sync2 != req_sync3) begin
    // New data available
    data_out <= data_reg;
  end
end""",
)

FOUR_PHASE_HANDSHAKE = CDCRecommendation(
    scenario="Handshake-based data transfer",
    solution="Four-phase handshake with proper synchronization",
    example="""
// Four-phase handshake CDC
// Source domain
always @(posedge clk_src) begin
  if (send_data && !req && ack_synced) begin
    data_reg <= data_in;
    req <= 1'b1;
  end else if (req && ack_synced) begin
    req <= 1'b0;
  end
end

// Sync ack back to source
always @(posedge clk_src) begin
  ack_sync1 <= ack;
  ack_synced <= ack_sync1;
end

// Destination domain
always @(posedge clk_dest) begin
  req_sync1 <= req;
  req_sync2 <= req_sync1;

  if (req_sync2 && !ack) begin
    data_out <= data_reg;
    ack <= 1'b1;
  end else if (!req_sync2 && ack) begin
    ack <= 1'b0;
  end
end""",
)

# None (no signal type given) is treated as single-bit
RECOMMENDATIONS: dict[SignalType | None, tuple[CDCRecommendation, ...]] = {
    None: (TWO_FLOP_SYNCHRONIZER,),
    "single-bit": (TWO_FLOP_SYNCHRONIZER,),
    "multi-bit": (GRAY_CODE_BUS, TOGGLE_HANDSHAKE_BUS),
    "bus": (GRAY_CODE_BUS, TOGGLE_HANDSHAKE_BUS),
    "handshake": (FOUR_PHASE_HANDSHAKE,),
}


def cdc_guidance(description: str, signal_type: SignalType | None = None) -> CDCGuidance:
    """Select CDC recommendations for a crossing signal type.

    Raises:
        ValueError: if `signal_type` is not a known signal type.
    """
    if signal_type not in RECOMMENDATIONS:
        raise ValueError(f"Unknown signal type: {signal_type}")

    return CDCGuidance(
        description=description,
        signalType=signal_type,
        recommendations=[rec.model_copy() for rec in RECOMMENDATIONS[signal_type]],
        generalGuidelines=list(GENERAL_GUIDELINES),
        toolRecommendations=list(TOOL_RECOMMENDATIONS),
    )
