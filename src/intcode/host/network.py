''' Packet-switched network of processors with a NAT monitor '''

import logging as lg
from dataclasses import dataclass, field
from typing import Sequence

from intcode.common.hwconf import NETWORK_SIZE, NAT_ADDRESS, NO_PACKET, IDLE_THRESHOLD
from intcode.runtime.cpu import Processor, Status, Output, NeedsInput, Halted


@dataclass(frozen=True)
class Packet:
    destination: int
    x: int
    y: int

    def __str__(self) -> str:
        return f'(x: {self.x}, y: {self.y}) for port {self.destination}'


class UnroutablePacket(Exception):
    def __init__(self, packet: Packet):
        super().__init__(f'No route for packet {packet}')
        self.packet = packet


@dataclass
class Node:
    address: int
    processor: Processor
    outbox: list[int] = field(default_factory=list)
    idle: int = 0  # Consecutive polls without traffic


class Network:
    nodes: list[Node]

    def __init__(self, program: Sequence[int], size: int = NETWORK_SIZE):
        self.nodes = [
            Node(address, Processor(program, [address]))
            for address in range(size)
        ]

    def poll(self, node: Node) -> Packet | Status:
        ''' Runs a node until it completes a packet or stops '''

        while len(node.outbox) < 3:
            status = node.processor.run()

            if not isinstance(status, Output):
                return status

            node.outbox.append(status.value)

        destination, x, y = node.outbox
        node.outbox.clear()
        return Packet(destination, x, y)

    def deliver(self, packet: Packet) -> bool:
        ''' Sends a packet to its node; False if it is addressed to the NAT '''

        if 0 <= packet.destination < len(self.nodes):
            lg.debug(f'Packet {packet}')
            self.nodes[packet.destination].processor.write_ints([packet.x, packet.y])
            return True

        if packet.destination == NAT_ADDRESS:
            return False

        raise UnroutablePacket(packet)

    def first_nat_packet(self) -> Packet | None:
        while True:
            for node in self.nodes:
                match self.poll(node):
                    case Packet() as packet:
                        if not self.deliver(packet):
                            return packet

                    case NeedsInput():
                        node.processor.write_int(NO_PACKET)

                    case Halted():
                        lg.warning(f'Node {node.address} halted')
                        return None

    def first_repeated_wakeup(self) -> Packet | None:
        nat: Packet | None = None
        last_wakeup: Packet | None = None

        while True:
            for node in self.nodes:
                match self.poll(node):
                    case Packet() as packet:
                        node.idle = 0

                        if not self.deliver(packet):
                            nat = Packet(0, packet.x, packet.y)

                    case NeedsInput():
                        node.idle += 1
                        node.processor.write_int(NO_PACKET)

                    case Halted():
                        lg.warning(f'Node {node.address} halted')
                        return None

            if any(node.idle < IDLE_THRESHOLD for node in self.nodes):
                continue

            if nat is None:
                lg.warning('Network is idle and the NAT holds no packet')
                return None

            wakeup, nat = nat, None
            self.deliver(wakeup)
            lg.info(f'Wake-up {wakeup}')

            if last_wakeup is not None and last_wakeup.y == wakeup.y:
                return wakeup

            last_wakeup = wakeup
