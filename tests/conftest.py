"""
Test fixtures shared across all HDLGuard tests.
"""

import pytest


@pytest.fixture
def combinational_verilog():
    """Combinational block with an incomplete if and sensitivity list."""
    return """always @(a or b) begin
  if (a)
    out = b;
end
"""


@pytest.fixture
def sequential_blocking_verilog():
    """Counter written with blocking assignments in a clocked block."""
    return """module counter(input clk, input rst, output reg [3:0] q);
  always @(posedge clk) begin
    if (rst)
      q = 4'd0;
    else
      q = q + 1;
  end
endmodule
"""


@pytest.fixture
def clean_verilog():
    """A D flip-flop with no issues."""
    return """module dff(input clk, input d, output reg q);
  always @(posedge clk) begin
    q <= d;
  end
endmodule
"""


@pytest.fixture
def two_clock_verilog():
    """Three clocked blocks over two clock domains."""
    return """always @(posedge clk1) begin
  a <= x;
end
always @(posedge clk2) begin
  b <= a;
end
always @(posedge clk2) begin
  c <= b;
end
"""


@pytest.fixture
def case_without_default_verilog():
    return """always @(*) begin
  case (sel)
    2'b00: y = a;
    2'b01: y = b;
  endcase
end
"""


@pytest.fixture
def vhdl_process():
    """VHDL process mixing a variable and a signal, with no else branch."""
    return """architecture rtl of foo is
  signal s : std_logic;
begin
  process(clk)
    variable v : integer;
  begin
    if rising_edge(clk) then
      v := v + 1;
    end if;
  end process;
end rtl;
"""
